class Doc:
    __slots__ = ()


class Text(Doc):
    __slots__ = ('value', )

    def __init__(self, value):
        if not isinstance(value, str):
            raise TypeError(
                f"Got {repr(value)} of type {type(value).__name__}, "
                "expected 'str'"
            )
        self.value = value

    def __repr__(self):
        return f'Text({repr(self.value)})'


class Nil(Doc):
    """The neutral element of both horizontal and vertical
    composition. Renders to nothing."""

    def __repr__(self):
        return 'EMPTY'


EMPTY = Nil()


class Space(Doc):
    """A single blank, dropped entirely in minified output."""

    def __repr__(self):
        return 'SPACE'


SPACE = Space()


class Indent(Doc):
    __slots__ = ('indent', 'doc')

    def __init__(self, indent, doc):
        assert isinstance(indent, int)
        assert isinstance(doc, Doc)

        self.indent = indent
        self.doc = doc

    def __repr__(self):
        return f'Indent({repr(self.indent)}, {repr(self.doc)})'


class Group(Doc):
    """Marks ``doc`` as a candidate for being compacted
    onto a single line when it is small enough."""
    __slots__ = ('doc', )

    def __init__(self, doc):
        assert isinstance(doc, Doc)
        self.doc = doc

    def __repr__(self):
        return f'Group({repr(self.doc)})'


class Beside(Doc):
    __slots__ = ('left', 'right')

    def __init__(self, left, right):
        assert isinstance(left, Doc)
        assert isinstance(right, Doc)
        self.left = left
        self.right = right

    def __repr__(self):
        return f'Beside({repr(self.left)}, {repr(self.right)})'


class Above(Doc):
    __slots__ = ('top', 'bottom')

    def __init__(self, top, bottom):
        assert isinstance(top, Doc)
        assert isinstance(bottom, Doc)
        self.top = top
        self.bottom = bottom

    def __repr__(self):
        return f'Above({repr(self.top)}, {repr(self.bottom)})'


class Enclose(Doc):
    """Brackets ``doc`` between ``open`` and ``close``. Lays out
    exactly like ``Group(Above(open, Above(doc, close)))``."""
    __slots__ = ('open', 'close', 'doc')

    def __init__(self, open, close, doc):
        assert isinstance(open, Doc)
        assert isinstance(close, Doc)
        assert isinstance(doc, Doc)
        self.open = open
        self.close = close
        self.doc = doc

    def __repr__(self):
        return (
            f'Enclose(open={repr(self.open)}, '
            f'close={repr(self.close)}, '
            f'doc={repr(self.doc)})'
        )
