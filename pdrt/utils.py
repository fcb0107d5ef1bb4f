from collections.abc import Iterable


def iterable_type_check(theList, type_info):
    if not isinstance(theList, Iterable) or isinstance(theList, str):
        return False
    for i in theList:
        if not isinstance(i, type_info):
            return False
    return True


def as_list(theIterable):
    """Copy an iterable argument into a new list. Returns None if the argument is a string or not iterable."""
    if not isinstance(theIterable, Iterable) or isinstance(theIterable, str):
        return None
    return list(theIterable)


def union_inplace(a, *args):
    for b in args:
        for x in b:
            if x not in a: a.append(x)
    return a
