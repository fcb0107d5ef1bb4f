import logging
import networkx as nx
from .utils import iterable_type_check, as_list, union_inplace
from .common import DRSVar, LambdaDRSVar, LambdaTuple, DRSRel
from .log import ExceptionRateLimitedLogAdaptor


_actual_logger = logging.getLogger(__name__)
_logger = ExceptionRateLimitedLogAdaptor(_actual_logger)


## Projection variable (a label or pointer). Zero is reserved for "no label".
PVar = int


def is_pvar(v):
    """Test whether v is a projection variable. Booleans are not accepted."""
    return isinstance(v, PVar) and not isinstance(v, bool)


class MAP(object):
    """Minimally Accessible Projection. MAP(v1, v2) means v2 is minimally accessible from v1."""
    def __init__(self, v1, v2):
        if not is_pvar(v1) or not is_pvar(v2):
            raise TypeError
        self._v1 = v1
        self._v2 = v2

    def __ne__(self, other):
        return type(self) != type(other) or self._v1 != other._v1 or self._v2 != other._v2

    def __eq__(self, other):
        return type(self) == type(other) and self._v1 == other._v1 and self._v2 == other._v2

    def __len__(self):
        return 2

    def __getitem__(self, idx):
        if idx < 0 or idx > 1:
            raise IndexError
        return self._v1 if idx == 0 else self._v2

    def __str__(self):
        return '(%i, %i)' % (self._v1, self._v2)

    def __repr__(self):
        return 'MAP(%i,%i)' % (self._v1, self._v2)

    def __hash__(self):
        return hash(self.to_tuple())

    def swap(self):
        return MAP(self._v2, self._v1)

    def to_tuple(self):
        return (self._v1, self._v2)


class AbstractPDRSRef(object):
    """Abstract PDRS referent"""

    # Helper for AbstractPDRS.get_lambda_tuples()
    def _lambda_tuple(self, u):
        raise NotImplementedError

    @property
    def isresolved(self):
        """Test if this referent is resolved (not a lambda referent)."""
        return False

    @property
    def var(self):
        """Converts this referent into a DRSVar."""
        raise NotImplementedError


class PDRSRef(AbstractPDRSRef):
    """A PDRS referent"""
    def __init__(self, drsVar):
        if isinstance(drsVar, str):
            drsVar = DRSVar(drsVar)
        elif not isinstance(drsVar, DRSVar):
            raise TypeError
        self._var = drsVar

    def __ne__(self, other):
        return type(self) != type(other) or self._var != other._var

    def __eq__(self, other):
        return type(self) == type(other) and self._var == other._var

    def __repr__(self):
        return 'PDRSRef(%s)' % self._var.to_string()

    def __hash__(self):
        return hash(self.__repr__())

    def _lambda_tuple(self, u):
        return u

    @property
    def isresolved(self):
        return True

    @property
    def var(self):
        return self._var


class LambdaPDRSRef(AbstractPDRSRef):
    """A lambda PDRS referent"""
    def __init__(self, lambdaVar, pos):
        """A lambda PDRSRef.

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
        return 'LambdaPDRSRef(%s,%i)' % (repr(self._var), self._pos)

    def __hash__(self):
        return hash(self.__repr__())

    def _lambda_tuple(self, u):
        u.add(LambdaTuple(self._var, self._pos))
        return u

    @property
    def var(self):
        return self._var.var

    @property
    def lambda_var(self):
        return self._var

    @property
    def pos(self):
        return self._pos


class PRef(object):
    """A projected referent, consisting of a PVar and a PDRSRef|LambdaPDRSRef"""
    def __init__(self, label, drsRef):
        if not is_pvar(label) or not isinstance(drsRef, AbstractPDRSRef):
            raise TypeError
        self._plabel = label
        self._ref = drsRef

    def __ne__(self, other):
        return type(self) != type(other) or self._plabel != other._plabel or self._ref != other._ref

    def __eq__(self, other):
        return type(self) == type(other) and self._plabel == other._plabel and self._ref == other._ref

    def __repr__(self):
        return 'PRef(%i,%s)' % (self._plabel, repr(self._ref))

    def __hash__(self):
        return hash(self.__repr__())

    # Helper for PDRS.get_lambda_tuples()
    def _lambda_tuple(self, u):
        return self._ref._lambda_tuple(u)

    @property
    def isresolved(self):
        return self._ref.isresolved

    @property
    def var(self):
        return self._ref.var

    @property
    def ref(self):
        return self._ref

    @property
    def plabel(self):
        return self._plabel


class AbstractPDRSRelation(object):
    """Abstract PDRS relation"""

    # Helper for AbstractPDRS.get_lambda_tuples()
    def _lambda_tuple(self, u):
        raise NotImplementedError

    @property
    def isresolved(self):
        return False

    def to_string(self):
        """Converts this instance into a string."""
        raise NotImplementedError

    def __str__(self):
        return self.to_string()


class PDRSRel(AbstractPDRSRelation):
    """A PDRS relation symbol"""
    def __init__(self, name):
        if not isinstance(name, DRSRel):
            raise TypeError
        self._name = name

    def __ne__(self, other):
        return type(self) != type(other) or self._name != other._name

    def __eq__(self, other):
        return type(self) == type(other) and self._name == other._name

    def __repr__(self):
        return 'PDRSRel(%s)' % self._name

    def __hash__(self):
        return hash(self.__repr__())

    def _lambda_tuple(self, u):
        return u

    @property
    def isresolved(self):
        return True

    @property
    def name(self):
        return self._name

    def to_string(self):
        return self._name


class LambdaPDRSRel(AbstractPDRSRelation):
    """A lambda PDRS relation"""
    def __init__(self, lambdaVar, pos):
        """A lambda PDRSRel.

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
        return 'LambdaPDRSRel(%s,%i)' % (repr(self._var), self._pos)

    def __hash__(self):
        return hash(self.__repr__())

    def _lambda_tuple(self, u):
        u.add(LambdaTuple(self._var, self._pos))
        return u

    @property
    def lambda_var(self):
        return self._var

    @property
    def pos(self):
        return self._pos

    def to_string(self):
        return self._var.to_string()


class AbstractPDRS(object):
    """Abstract Projective Discourse Representation Structure"""

    # Derives a list of projection graph edges from a PDRS
    def _edges(self, es):
        return es

    @property
    def label(self):
        """Get the projection label. Zero if there is no label."""
        return 0

    @property
    def islambda(self):
        """Test whether this PDRS is entirely a LambdaPDRS (at its top-level)."""
        return False

    @property
    def ismerge(self):
        """Test whether this PDRS is an AMerge or PMerge (at its top-level)."""
        return False

    @property
    def isresolved(self):
        """Test whether this PDRS is resolved (containing no unresolved merges or lambdas)."""
        return False

    @property
    def universe(self):
        """Returns the universe of projected referents in this PDRS. A shallow copy is always returned."""
        return []

    def find_subdrs(self, d):
        """Test whether d is a direct or indirect sub-PDRS of this PDRS and return the found sub-PDRS."""
        return None

    def has_subdrs(self, d):
        """Returns whether d is a direct or indirect sub-PDRS of this PDRS"""
        return self.find_subdrs(d) is not None

    def get_empty(self):
        """Returns an empty PDRS, if possible with the same label as this one."""
        raise NotImplementedError

    def get_labels(self, u=None):
        """Returns all the labels in a PDRS."""
        if u is None: return []
        return u

    def get_universes(self, u=None):
        """Returns the list of PRef's from all universes in this PDRS.

        Args:
            u: An initial list. If None `u` is set to [].

        Returns:
            A list of PRef's appended to `u`.
        """
        if u is None: return []
        return u

    def get_maps(self, u=None):
        """Returns the list of MAPs in this PDRS, without duplicates."""
        if u is None: return []
        return u

    def get_pvars(self, u=None):
        """Returns the set of all PVar's in this PDRS."""
        if u is None: return set()
        return u

    def get_lambda_tuples(self, u=None):
        """Returns the set of all lambda tuples in this PDRS.

        Args:
            u: An initial set of tuples. If not present `u` is set to `set()`.

        Returns:
            A set of LambdaTuple instances union'ed with `u`.
        """
        if u is None: return set()
        return u

    def get_lambdas(self):
        """Get the ordered list of all lambda variables in this PDRS.

        Returns:
            A list of LambdaDRSVar instances.
        """
        lts = sorted(self.get_lambda_tuples())
        return [x.var for x in lts]

    def get_pgraph(self):
        """Derives a projection graph for this PDRS.

        Returns:
            A networkx.DiGraph instance
        """
        es = self._edges([])
        g = nx.DiGraph()
        g.add_edges_from(es)
        _logger.debug('projection graph has %d nodes and %d edges', g.number_of_nodes(), g.number_of_edges())
        return g

    def has_accessible_context(self, p1, p2):
        """Test whether PDRS context p2 is accessible from PDRS context p1 in this PDRS"""
        pg = self.get_pgraph()
        return p1 in pg and p2 in pg and nx.has_path(pg, p1, p2)


class LambdaPDRS(AbstractPDRS):
    """A lambda PDRS."""
    def __init__(self, lambdaVar, pos):
        """A lambda PDRS.

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
        return 'LambdaPDRS(%s,%i)' % (repr(self._var), self._pos)

    @property
    def islambda(self):
        return True

    @property
    def lambda_var(self):
        return self._var

    @property
    def pos(self):
        return self._pos

    def get_empty(self):
        return self

    def get_lambda_tuples(self, u=None):
        lt = LambdaTuple(self._var, self._pos)
        if u is None:
            return set([lt])
        u.add(lt)
        return u


class GenericMerge(AbstractPDRS):
    """Common merge pattern"""
    def __init__(self, drsA, drsB):
        if not isinstance(drsA, AbstractPDRS) or not isinstance(drsB, AbstractPDRS):
            raise TypeError
        self._drsA = drsA
        self._drsB = drsB

    def __ne__(self, other):
        return type(self) != type(other) or self._drsA != other._drsA or self._drsB != other._drsB

    def __eq__(self, other):
        return type(self) == type(other) and self._drsA == other._drsA and self._drsB == other._drsB

    def __repr__(self):
        return '%s(%s,%s)' % (type(self).__name__, repr(self._drsA), repr(self._drsB))

    def _edges(self, es):
        es = self._drsA._edges(es)
        return self._drsB._edges(es)

    @property
    def ldrs(self):
        return self._drsA

    @property
    def rdrs(self):
        return self._drsB

    @property
    def label(self):
        # The right operand determines the label unless it is unresolved
        return self._drsA.label if self._drsB.islambda else self._drsB.label

    @property
    def islambda(self):
        return self._drsA.islambda and self._drsB.islambda

    @property
    def ismerge(self):
        return True

    @property
    def universe(self):
        u = self._drsA.universe
        u.extend(self._drsB.universe)
        return u

    def find_subdrs(self, d):
        sd = self._drsA.find_subdrs(d)
        if sd is not None:
            return sd
        return self._drsB.find_subdrs(d)

    def get_empty(self):
        if self._drsB.islambda:
            return type(self)(self._drsA.get_empty(), self._drsB)
        return self._drsB.get_empty()

    def get_labels(self, u=None):
        u = self._drsA.get_labels(u)
        return self._drsB.get_labels(u)

    def get_universes(self, u=None):
        u = self._drsA.get_universes(u)
        return self._drsB.get_universes(u)

    def get_maps(self, u=None):
        u = self._drsA.get_maps(u)
        return self._drsB.get_maps(u)

    def get_pvars(self, u=None):
        u = self._drsA.get_pvars(u)
        return self._drsB.get_pvars(u)

    def get_lambda_tuples(self, u=None):
        u = self._drsA.get_lambda_tuples(u)
        return self._drsB.get_lambda_tuples(u)


class AMerge(GenericMerge):
    """An assertive merge between two PDRSs"""
    def __init__(self, drsA, drsB):
        super(AMerge, self).__init__(drsA, drsB)


class PMerge(GenericMerge):
    """A projective merge between two PDRSs"""
    def __init__(self, drsA, drsB):
        super(PMerge, self).__init__(drsA, drsB)


class PDRS(AbstractPDRS):
    """Projective Discourse Representation Structure.

    A Projected Discourse Representation Structure (PDRS) consists of a PDRS
    label and three sets: a set of MAPs, a set of projected discourse
    referents and a set of projected conditions.

    Pointers of referents and conditions can indicate projection, and the set
    of MAPs can indicate constraints on projection: MAP(1,2) means that 2 is an
    accessible context from 1, i.e., context 1 is weakly subordinate to 2 ("1
    <= 2"). Equivalence between two contexts ("1 = 2") can be represented by
    introducing a reciprocal accessibility relation: MAP(1,2) and MAP(2,1).

    All three sets are held as lists in insertion order and compared as such.
    """
    def __init__(self, label, mapper, referents, conditions):
        """Constructor.

        Args:
            label: An integer label
            mapper: A List of MAPS indicating constraints on projection. Integer pairs are converted to MAP's.
            referents: A list of projected referents PRef's.
            conditions: A list of projected conditions PCond's.
        """
        mapper = as_list(mapper)
        referents = as_list(referents)
        conditions = as_list(conditions)
        if iterable_type_check(mapper, (MAP, tuple)):
            mapper = [MAP(*x) if isinstance(x, tuple) and len(x) == 2 else x for x in mapper]
        if not iterable_type_check(referents, PRef) or not iterable_type_check(conditions, PCond) or \
                not is_pvar(label) or not iterable_type_check(mapper, MAP):
            raise TypeError
        self._refs = referents
        self._conds = conditions
        self._label = label
        self._mapper = mapper

    def __ne__(self, other):
        return not self.__eq__(other)

    def __eq__(self, other):
        return type(self) == type(other) and self._label == other._label and self._mapper == other._mapper \
               and self._refs == other._refs and self._conds == other._conds

    def __repr__(self):
        return 'PDRS(%i,%s,%s,%s)' % (self._label, repr(self._mapper), repr(self._refs), repr(self._conds))

    def _edges(self, es):
        es.append((self._label, self._label))
        es.extend([m.to_tuple() for m in self._mapper])
        es.extend([(self._label, r.plabel) for r in self._refs])
        for c in self._conds:
            es = c._edges(es, self._label)
        return es

    @property
    def referents(self):
        return [x for x in self._refs] # shallow copy

    @property
    def universe(self):
        return [x for x in self._refs] # shallow copy

    @property
    def conditions(self):
        return [x for x in self._conds] # shallow copy

    @property
    def label(self):
        return self._label

    @property
    def mapper(self):
        return [x for x in self._mapper] # shallow copy

    @property
    def isresolved(self):
        return all([x.isresolved for x in self._refs]) and all([x.isresolved for x in self._conds])

    def find_subdrs(self, d):
        if self == d:
            return self
        for c in self._conds:
            sd = c.find_subdrs(d)
            if sd is not None:
                return sd
        return None

    def get_empty(self):
        return PDRS(self._label, [], [], [])

    def get_labels(self, u=None):
        if u is None:
            u = [self._label]
        else:
            u.append(self._label)
        for c in self._conds:
            u = c._labels(u)
        return u

    def get_universes(self, u=None):
        if u is None:
            u = [x for x in self._refs] # shallow copy
        else:
            u.extend(self._refs)
        for c in self._conds:
            u = c._universes(u)
        return u

    def get_maps(self, u=None):
        if u is None:
            u = []
        u = union_inplace(u, self._mapper)
        for c in self._conds:
            u = c._maps(u)
        return u

    def get_pvars(self, u=None):
        if u is None:
            u = set()
        u.add(self._label)
        for x, y in self._mapper:
            u.add(x)
            u.add(y)
        for r in self._refs:
            u.add(r.plabel)
        for c in self._conds:
            u = c._pvars(u)
        return u

    def get_lambda_tuples(self, u=None):
        if u is None:
            u = set()
        for r in self._refs:
            u = r._lambda_tuple(u)
        for c in self._conds:
            u = c._lambda_tuple(u)
        return u


class PCond(object):
    """A projected condition, consisting of a PVar and a AbstractPDRSCond."""
    def __init__(self, label, cond):
        if not is_pvar(label) or not isinstance(cond, AbstractPDRSCond):
            raise TypeError
        self._plabel = label
        self._cond = cond

    def __ne__(self, other):
        return type(self) != type(other) or self._plabel != other._plabel or self._cond != other._cond

    def __eq__(self, other):
        return type(self) == type(other) and self._plabel == other._plabel and self._cond == other._cond

    def __repr__(self):
        return 'PCond(%i,%s)' % (self._plabel, repr(self._cond))

    # Pass down to member condition, the edge to the pointer belongs to the enclosing PDRS
    def _edges(self, es, pv):
        es.append((pv, self._plabel))
        return self._cond._edges(es, pv)

    def _pvars(self, u):
        u.add(self._plabel)
        return self._cond._pvars(u)

    def _labels(self, u):
        return self._cond._labels(u)

    def _universes(self, u):
        return self._cond._universes(u)

    def _maps(self, u):
        return self._cond._maps(u)

    def _lambda_tuple(self, u):
        return self._cond._lambda_tuple(u)

    @property
    def plabel(self):
        return self._plabel

    @property
    def condition(self):
        return self._cond

    @property
    def isresolved(self):
        return self._cond.isresolved

    def find_subdrs(self, d):
        return self._cond.find_subdrs(d)


## The projected condition type is also known as PCon.
PCon = PCond


class AbstractPDRSCond(object):
    """Abstract PDRS condition. Subclasses hold zero, one or two sub-PDRS's."""

    def _subdrs_edges(self, es, pv, d):
        # A sub-PDRS is linked to the context in which it is embedded
        if d.islambda:
            return es
        es.append((d.label, pv))
        return d._edges(es)

    def _edges(self, es, pv):
        raise NotImplementedError

    def _pvars(self, u):
        raise NotImplementedError

    def _labels(self, u):
        raise NotImplementedError

    def _universes(self, u):
        raise NotImplementedError

    def _maps(self, u):
        raise NotImplementedError

    def _lambda_tuple(self, u):
        raise NotImplementedError

    @property
    def isresolved(self):
        raise NotImplementedError

    def find_subdrs(self, d):
        """Test whether d is a direct or indirect sub-PDRS of this condition and return the found sub-PDRS."""
        raise NotImplementedError


class PRel(AbstractPDRSCond):
    """A relation defined on a set of referents"""
    def __init__(self, drsRel, drsRefs):
        if isinstance(drsRel, str):
            drsRel = PDRSRel(drsRel)
        drsRefs = as_list(drsRefs)
        if not isinstance(drsRel, AbstractPDRSRelation) or not iterable_type_check(drsRefs, AbstractPDRSRef):
            raise TypeError
        self._rel = drsRel
        self._refs = drsRefs

    def __ne__(self, other):
        return type(self) != type(other) or self._rel != other._rel or self._refs != other._refs

    def __eq__(self, other):
        return type(self) == type(other) and self._rel == other._rel and self._refs == other._refs

    def __repr__(self):
        return 'PRel(%s,%s)' % (repr(self._rel), repr(self._refs))

    def _edges(self, es, pv):
        return es

    def _pvars(self, u):
        return u

    def _labels(self, u):
        return u

    def _universes(self, u):
        return u

    def _maps(self, u):
        return u

    def _lambda_tuple(self, u):
        u = self._rel._lambda_tuple(u)
        for x in self._refs:
            u = x._lambda_tuple(u)
        return u

    @property
    def relation(self):
        return self._rel

    @property
    def referents(self):
        return [x for x in self._refs]

    @property
    def isresolved(self):
        return self._rel.isresolved and all([x.isresolved for x in self._refs])

    def find_subdrs(self, d):
        return None


class PNeg(AbstractPDRSCond):
    """A negated PDRS"""
    def __init__(self, drs):
        if not isinstance(drs, AbstractPDRS):
            raise TypeError
        self._drs = drs

    def __ne__(self, other):
        return type(self) != type(other) or self._drs != other._drs

    def __eq__(self, other):
        return type(self) == type(other) and self._drs == other._drs

    def __repr__(self):
        return 'PNeg(%s)' % repr(self._drs)

    def _edges(self, es, pv):
        return self._subdrs_edges(es, pv, self._drs)

    def _pvars(self, u):
        return self._drs.get_pvars(u)

    def _labels(self, u):
        return self._drs.get_labels(u)

    def _universes(self, u):
        return self._drs.get_universes(u)

    def _maps(self, u):
        return self._drs.get_maps(u)

    def _lambda_tuple(self, u):
        return self._drs.get_lambda_tuples(u)

    @property
    def drs(self):
        return self._drs

    @property
    def isresolved(self):
        return self._drs.isresolved

    def find_subdrs(self, d):
        return self._drs.find_subdrs(d)


class PDiamond(AbstractPDRSCond):
    """A possible PDRS"""
    def __init__(self, drs):
        if not isinstance(drs, AbstractPDRS):
            raise TypeError
        self._drs = drs

    def __ne__(self, other):
        return type(self) != type(other) or self._drs != other._drs

    def __eq__(self, other):
        return type(self) == type(other) and self._drs == other._drs

    def __repr__(self):
        return 'PDiamond(%s)' % repr(self._drs)

    def _edges(self, es, pv):
        return self._subdrs_edges(es, pv, self._drs)

    def _pvars(self, u):
        return self._drs.get_pvars(u)

    def _labels(self, u):
        return self._drs.get_labels(u)

    def _universes(self, u):
        return self._drs.get_universes(u)

    def _maps(self, u):
        return self._drs.get_maps(u)

    def _lambda_tuple(self, u):
        return self._drs.get_lambda_tuples(u)

    @property
    def drs(self):
        return self._drs

    @property
    def isresolved(self):
        return self._drs.isresolved

    def find_subdrs(self, d):
        return self._drs.find_subdrs(d)


class PBox(AbstractPDRSCond):
    """A necessary PDRS"""
    def __init__(self, drs):
        if not isinstance(drs, AbstractPDRS):
            raise TypeError
        self._drs = drs

    def __ne__(self, other):
        return type(self) != type(other) or self._drs != other._drs

    def __eq__(self, other):
        return type(self) == type(other) and self._drs == other._drs

    def __repr__(self):
        return 'PBox(%s)' % repr(self._drs)

    def _edges(self, es, pv):
        return self._subdrs_edges(es, pv, self._drs)

    def _pvars(self, u):
        return self._drs.get_pvars(u)

    def _labels(self, u):
        return self._drs.get_labels(u)

    def _universes(self, u):
        return self._drs.get_universes(u)

    def _maps(self, u):
        return self._drs.get_maps(u)

    def _lambda_tuple(self, u):
        return self._drs.get_lambda_tuples(u)

    @property
    def drs(self):
        return self._drs

    @property
    def isresolved(self):
        return self._drs.isresolved

    def find_subdrs(self, d):
        return self._drs.find_subdrs(d)


class PProp(AbstractPDRSCond):
    """A proposition PDRS"""
    def __init__(self, drsRef, drs):
        if not isinstance(drs, AbstractPDRS) or not isinstance(drsRef, AbstractPDRSRef):
            raise TypeError
        self._drs = drs
        self._ref = drsRef

    def __ne__(self, other):
        return type(self) != type(other) or self._ref != other._ref or self._drs != other._drs

    def __eq__(self, other):
        return type(self) == type(other) and self._ref == other._ref and self._drs == other._drs

    def __repr__(self):
        return 'PProp(%s,%s)' % (repr(self._ref), repr(self._drs))

    def _edges(self, es, pv):
        return self._subdrs_edges(es, pv, self._drs)

    def _pvars(self, u):
        return self._drs.get_pvars(u)

    def _labels(self, u):
        return self._drs.get_labels(u)

    def _universes(self, u):
        return self._drs.get_universes(u)

    def _maps(self, u):
        return self._drs.get_maps(u)

    def _lambda_tuple(self, u):
        u = self._ref._lambda_tuple(u)
        return self._drs.get_lambda_tuples(u)

    @property
    def referent(self):
        return self._ref

    @property
    def drs(self):
        return self._drs

    @property
    def isresolved(self):
        return self._ref.isresolved and self._drs.isresolved

    def find_subdrs(self, d):
        return self._drs.find_subdrs(d)


class PImp(AbstractPDRSCond):
    """An implication between two PDRSs"""
    def __init__(self, antecedent, consequent):
        if not isinstance(antecedent, AbstractPDRS) or not isinstance(consequent, AbstractPDRS):
            raise TypeError
        self._drsA = antecedent
        self._drsB = consequent

    def __ne__(self, other):
        return type(self) != type(other) or self._drsA != other._drsA or self._drsB != other._drsB

    def __eq__(self, other):
        return type(self) == type(other) and self._drsA == other._drsA and self._drsB == other._drsB

    def __repr__(self):
        return 'PImp(%s,%s)' % (repr(self._drsA), repr(self._drsB))

    def _edges(self, es, pv):
        es = self._subdrs_edges(es, pv, self._drsA)
        return self._subdrs_edges(es, pv, self._drsB)

    def _pvars(self, u):
        u = self._drsA.get_pvars(u)
        return self._drsB.get_pvars(u)

    def _labels(self, u):
        u = self._drsA.get_labels(u)
        return self._drsB.get_labels(u)

    def _universes(self, u):
        u = self._drsA.get_universes(u)
        return self._drsB.get_universes(u)

    def _maps(self, u):
        u = self._drsA.get_maps(u)
        return self._drsB.get_maps(u)

    def _lambda_tuple(self, u):
        u = self._drsA.get_lambda_tuples(u)
        return self._drsB.get_lambda_tuples(u)

    @property
    def antecedent(self):
        return self._drsA

    @property
    def consequent(self):
        return self._drsB

    @property
    def isresolved(self):
        return self._drsA.isresolved and self._drsB.isresolved

    def find_subdrs(self, d):
        sd = self._drsA.find_subdrs(d)
        if sd is not None:
            return sd
        return self._drsB.find_subdrs(d)


class POr(AbstractPDRSCond):
    """A disjunction between two PDRSs"""
    def __init__(self, drsA, drsB):
        if not isinstance(drsA, AbstractPDRS) or not isinstance(drsB, AbstractPDRS):
            raise TypeError
        self._drsA = drsA
        self._drsB = drsB

    def __ne__(self, other):
        return type(self) != type(other) or self._drsA != other._drsA or self._drsB != other._drsB

    def __eq__(self, other):
        return type(self) == type(other) and self._drsA == other._drsA and self._drsB == other._drsB

    def __repr__(self):
        return 'POr(%s,%s)' % (repr(self._drsA), repr(self._drsB))

    def _edges(self, es, pv):
        es = self._subdrs_edges(es, pv, self._drsA)
        return self._subdrs_edges(es, pv, self._drsB)

    def _pvars(self, u):
        u = self._drsA.get_pvars(u)
        return self._drsB.get_pvars(u)

    def _labels(self, u):
        u = self._drsA.get_labels(u)
        return self._drsB.get_labels(u)

    def _universes(self, u):
        u = self._drsA.get_universes(u)
        return self._drsB.get_universes(u)

    def _maps(self, u):
        u = self._drsA.get_maps(u)
        return self._drsB.get_maps(u)

    def _lambda_tuple(self, u):
        u = self._drsA.get_lambda_tuples(u)
        return self._drsB.get_lambda_tuples(u)

    @property
    def ldrs(self):
        return self._drsA

    @property
    def rdrs(self):
        return self._drsB

    @property
    def isresolved(self):
        return self._drsA.isresolved and self._drsB.isresolved

    def find_subdrs(self, d):
        sd = self._drsA.find_subdrs(d)
        if sd is not None:
            return sd
        return self._drsB.find_subdrs(d)


def _check_pdrs(*args):
    if not iterable_type_check(args, AbstractPDRS):
        raise TypeError


def is_lambda_pdrs(d):
    """Returns whether a PDRS is entirely a LambdaPDRS (at its top-level)."""
    _check_pdrs(d)
    return d.islambda


def is_merge_pdrs(d):
    """Returns whether a PDRS is an unresolved AMerge or PMerge (at its top-level)."""
    _check_pdrs(d)
    return d.ismerge


def is_resolved_pdrs(d):
    """Returns whether a PDRS is resolved (containing no unresolved merges or lambdas)."""
    _check_pdrs(d)
    return d.isresolved


def pdrs_label(d):
    """Returns the label of a PDRS.

    Args:
        d: An AbstractPDRS instance.

    Returns:
        A PVar. Zero if `d` is a lambda PDRS.
    """
    _check_pdrs(d)
    return d.label


def pdrs_universe(d):
    """Returns the universe of a PDRS. Merges return the left universe followed by the right universe.

    Args:
        d: An AbstractPDRS instance.

    Returns:
        A list of PRef instances.
    """
    _check_pdrs(d)
    return d.universe


def is_sub_pdrs(d1, d2):
    """Returns whether PDRS d1 is a direct or indirect sub-PDRS of PDRS d2.

    Only a resolved PDRS is compared with `d1` directly, so a lambda PDRS or a merge is never a
    sub-PDRS of itself.

    Args:
        d1: An AbstractPDRS instance.
        d2: An AbstractPDRS instance.

    Returns:
        True if `d1` equals `d2` or a PDRS embedded in `d2`.
    """
    _check_pdrs(d1, d2)
    return d2.has_subdrs(d1)


def empty_pdrs(d):
    """Returns an empty PDRS, if possible with the same label as d."""
    _check_pdrs(d)
    return d.get_empty()


def pdrs_labels(d):
    """Returns all the labels in a PDRS."""
    _check_pdrs(d)
    return d.get_labels()


def pdrs_universes(d):
    """Returns the list of PRef's from all universes in a PDRS."""
    _check_pdrs(d)
    return d.get_universes()


def pdrs_maps(d):
    """Returns the list of MAPs in a PDRS."""
    _check_pdrs(d)
    return d.get_maps()


def pdrs_pvars(d):
    """Returns the set of all projection variables in a PDRS."""
    _check_pdrs(d)
    return d.get_pvars()


def pdrs_lambdas(d):
    """Returns the list of all lambda variables in a PDRS, ordered by argument position."""
    _check_pdrs(d)
    return d.get_lambdas()


def projection_graph(d):
    """Derives the projection graph of a PDRS.

    Returns:
        A networkx.DiGraph instance. An edge (p1, p2) means p2 is accessible from p1.
    """
    _check_pdrs(d)
    return d.get_pgraph()


def is_accessible_context(d, p1, p2):
    """Test whether PDRS context p2 is accessible from PDRS context p1 in PDRS d."""
    _check_pdrs(d)
    return d.has_accessible_context(p1, p2)
