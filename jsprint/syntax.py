"""Syntax tree of the JavaScript expressions and modules that
``jsprint`` knows how to lay out."""


class Node(object):
    """Base for immutable syntax nodes. Nodes compare structurally
    on the values of their slots."""
    __slots__ = ()

    def _fields(self):
        return tuple(getattr(self, name) for name in self.__slots__)

    def __eq__(self, other):
        if type(self) is not type(other):
            return NotImplemented
        return self._fields() == other._fields()

    def __hash__(self):
        return hash((type(self).__name__, *self._fields()))

    def __repr__(self):
        args = ', '.join(repr(value) for value in self._fields())
        return f'{type(self).__name__}({args})'


# Identifiers

class LocalId(Node):
    """A de Bruijn index."""
    __slots__ = ('index', )

    def __init__(self, index):
        assert isinstance(index, int)
        self.index = index


class GlobalId(Node):
    __slots__ = ('parts', )

    def __init__(self, parts):
        self.parts = tuple(parts)

    def __lt__(self, other):
        if not isinstance(other, GlobalId):
            return NotImplemented
        return self.parts < other.parts


class Comment(Node):
    __slots__ = ('text', )

    def __init__(self, text=''):
        assert isinstance(text, str)
        self.text = text


NO_COMMENT = Comment()


class MemberId(Node):
    __slots__ = ('name', )

    def __init__(self, name):
        assert isinstance(name, str)
        self.name = name

    def sort_key(self):
        return (0, self.name)

    def __lt__(self, other):
        return self.sort_key() < other.sort_key()


class MemberIndex(Node):
    __slots__ = ('index', 'comment')

    def __init__(self, index, comment=NO_COMMENT):
        assert isinstance(index, int)
        assert isinstance(comment, Comment)
        self.index = index
        self.comment = comment

    def sort_key(self):
        return (1, self.index, self.comment.text)

    def __lt__(self, other):
        return self.sort_key() < other.sort_key()


# Expressions

class Exp(Node):
    __slots__ = ()


class Self(Exp):
    __slots__ = ()

    def __repr__(self):
        return 'SELF'


SELF = Self()


class Local(Exp):
    __slots__ = ('id', )

    def __init__(self, id):
        assert isinstance(id, LocalId)
        self.id = id


class Global(Exp):
    __slots__ = ('id', )

    def __init__(self, id):
        assert isinstance(id, GlobalId)
        self.id = id


class Undefined(Exp):
    __slots__ = ()

    def __repr__(self):
        return 'UNDEFINED'


UNDEFINED = Undefined()


class Null(Exp):
    __slots__ = ()

    def __repr__(self):
        return 'NULL'


NULL = Null()


class String(Exp):
    __slots__ = ('value', )

    def __init__(self, value):
        assert isinstance(value, str)
        self.value = value


class Char(Exp):
    __slots__ = ('value', )

    def __init__(self, value):
        assert isinstance(value, str) and len(value) == 1
        self.value = value


class Integer(Exp):
    __slots__ = ('value', )

    def __init__(self, value):
        assert isinstance(value, int)
        self.value = value


class Double(Exp):
    __slots__ = ('value', )

    def __init__(self, value):
        self.value = float(value)


class Lambda(Exp):
    """A function binding ``arity`` variables in ``body``."""
    __slots__ = ('arity', 'body')

    def __init__(self, arity, body):
        assert isinstance(arity, int) and arity >= 0
        assert isinstance(body, Exp)
        self.arity = arity
        self.body = body


class Object(Exp):
    __slots__ = ('members', )

    def __init__(self, members=None):
        if members is None:
            members = {}
        self.members = dict(members)


class Array(Exp):
    """Array literal; each element is a ``(Comment, Exp)`` pair."""
    __slots__ = ('elements', )

    def __init__(self, elements):
        self.elements = tuple(
            (comment, exp) for comment, exp in elements
        )


class Apply(Exp):
    __slots__ = ('fn', 'args')

    def __init__(self, fn, args):
        assert isinstance(fn, Exp)
        self.fn = fn
        self.args = tuple(args)


class Lookup(Exp):
    __slots__ = ('exp', 'member')

    def __init__(self, exp, member):
        assert isinstance(exp, Exp)
        assert isinstance(member, (MemberId, MemberIndex))
        self.exp = exp
        self.member = member


class If(Exp):
    __slots__ = ('cond', 'then', 'otherwise')

    def __init__(self, cond, then, otherwise):
        self.cond = cond
        self.then = then
        self.otherwise = otherwise


class PreOp(Exp):
    __slots__ = ('op', 'exp')

    def __init__(self, op, exp):
        assert isinstance(op, str)
        self.op = op
        self.exp = exp


class BinOp(Exp):
    __slots__ = ('left', 'op', 'right')

    def __init__(self, left, op, right):
        assert isinstance(op, str)
        self.left = left
        self.op = op
        self.right = right


class Const(Exp):
    __slots__ = ('value', )

    def __init__(self, value):
        assert isinstance(value, str)
        self.value = value


class PlainJS(Exp):
    __slots__ = ('code', )

    def __init__(self, code):
        assert isinstance(code, str)
        self.code = code


# Modules

class Export(Node):
    """Assigns ``exp`` to the member ``path`` of ``exports``."""
    __slots__ = ('path', 'exp')

    def __init__(self, path, exp):
        self.path = tuple(path)
        assert isinstance(exp, Exp)
        self.exp = exp


class Module(Node):
    __slots__ = ('name', 'imports', 'exports', 'call_main')

    def __init__(self, name, imports=(), exports=(), call_main=None):
        assert isinstance(name, GlobalId)
        self.name = name
        self.imports = tuple(imports)
        self.exports = tuple(exports)
        self.call_main = call_main


def children(exp):
    """Direct subexpressions of ``exp``."""
    if isinstance(exp, Lambda):
        return [exp.body]
    elif isinstance(exp, Object):
        return list(exp.members.values())
    elif isinstance(exp, Array):
        return [e for _, e in exp.elements]
    elif isinstance(exp, Apply):
        return [exp.fn, *exp.args]
    elif isinstance(exp, Lookup):
        return [exp.exp]
    elif isinstance(exp, If):
        return [exp.cond, exp.then, exp.otherwise]
    elif isinstance(exp, PreOp):
        return [exp.exp]
    elif isinstance(exp, BinOp):
        return [exp.left, exp.right]
    return []


def global_ids(exports):
    """Yields every ``GlobalId`` referenced in the expressions of
    ``exports``, in order of first appearance, without duplicates."""
    seen = set()
    for export in exports:
        stack = [export.exp]
        while stack:
            exp = stack.pop()
            if isinstance(exp, Global):
                if exp.id not in seen:
                    seen.add(exp.id)
                    yield exp.id
            else:
                stack.extend(reversed(children(exp)))
