class SLine(object):
    """One flattened output line: ``text`` to be placed
    ``indent`` columns from the left margin."""
    __slots__ = ('indent', 'text')

    def __init__(self, indent, text):
        assert isinstance(indent, int)
        assert isinstance(text, str)
        self.indent = indent
        self.text = text

    @property
    def end(self):
        return self.indent + len(self.text)

    def __eq__(self, other):
        if not isinstance(other, SLine):
            return NotImplemented
        return self.indent == other.indent and self.text == other.text

    def __hash__(self):
        return hash((self.indent, self.text))

    def __repr__(self):
        return f'SLine({repr(self.indent)}, {repr(self.text)})'
