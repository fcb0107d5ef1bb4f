from .utils import iterable_type_check, as_list


## Relation name type shared by DRS and PDRS relations.
DRSRel = str


class DRSVar(object):
    """A discourse referent variable. Identity is textual."""
    def __init__(self, name):
        if not isinstance(name, str):
            raise TypeError
        self._name = name

    def __repr__(self):
        return 'DRSVar(%s)' % self._name

    def __str__(self):
        return self._name

    def __eq__(self, other):
        return type(self) == type(other) and self._name == other._name

    def __ne__(self, other):
        return type(self) != type(other) or self._name != other._name

    def __hash__(self):
        return hash(self._name)

    def __lt__(self, other):
        return self._name < other._name

    def __le__(self, other):
        return self._name <= other._name

    def __gt__(self, other):
        return not self.__le__(other)

    def __ge__(self, other):
        return not self.__lt__(other)

    ## @property name
    @property
    def name(self):
        return self._name

    def to_string(self):
        return self._name


class LambdaDRSVar(object):
    def __init__(self, drsVar, drsVarSet):
        """A lambda variable.

        Args:
            drsVar: A DRSVar or a string.
            drsVarSet: The list of referents to be applied to the lambda. Strings are converted to DRSVar's.
        """
        if isinstance(drsVar, str):
            drsVar = DRSVar(drsVar)
        drsVarSet = as_list(drsVarSet)
        if iterable_type_check(drsVarSet, (str, DRSVar)):
            drsVarSet = [DRSVar(x) if isinstance(x, str) else x for x in drsVarSet]
        if not isinstance(drsVar, DRSVar) or not iterable_type_check(drsVarSet, DRSVar):
            raise TypeError
        self._var = drsVar
        self._set = drsVarSet

    def __eq__(self, other):
        return type(self) == type(other) and other._var == self._var and other._set == self._set

    def __ne__(self, other):
        return type(self) != type(other) or other._var != self._var or other._set != self._set

    def __repr__(self):
        return 'LambdaDRSVar(%s,%s)' % (self._var.to_string(), [x.to_string() for x in self._set])

    def __str__(self):
        return self._var.to_string()

    def __hash__(self):
        return hash(self._var) ^ hash(len(self._set))

    def __lt__(self, other):
        return self._var < other._var

    def __le__(self, other):
        return self._var <= other._var

    def __gt__(self, other):
        return not self.__le__(other)

    def __ge__(self, other):
        return not self.__lt__(other)

    ## @property var
    @property
    def var(self):
        return self._var

    ## @property referents
    @property
    def referents(self):
        return [x for x in self._set] # shallow copy

    ## @property name
    @property
    def name(self):
        return self._var.name

    def to_string(self):
        return self._var.to_string()


class LambdaTuple(object):
    """Lambda tuple"""
    def __init__(self, lambdaVar, pos):
        """A lambda tuple.

        Args:
            lambdaVar: A LambdaDRSVar instance.
            pos: Argument position.
        """
        if not isinstance(lambdaVar, LambdaDRSVar) or not isinstance(pos, int):
            raise TypeError
        self._var = lambdaVar
        self._pos = pos

    def __ne__(self, other):
        return type(self) != type(other) or self._var != other._var or self._pos != other._pos

    def __eq__(self, other):
        return type(self) == type(other) and self._var == other._var and self._pos == other._pos

    def __repr__(self):
        return 'LambdaTuple(%s,%i)' % (repr(self._var), self._pos)

    def __hash__(self):
        return hash(self.__repr__())

    def __lt__(self, other):
        return self._pos < other._pos or (self._pos == other._pos and self._var < other._var)

    def __le__(self, other):
        return self._pos < other._pos or (self._pos == other._pos and self._var <= other._var)

    def __gt__(self, other):
        return not self.__le__(other)

    def __ge__(self, other):
        return not self.__lt__(other)

    @property
    def var(self):
        return self._var

    @property
    def pos(self):
        return self._pos
