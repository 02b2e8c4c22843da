from blockfall.shape import ShapeType


class ScriptedRandom:
    """Hands out shape types in a fixed order, repeating the last one."""

    def __init__(self, *types):
        self._types = list(types)

    def choice(self, seq):
        assert list(seq) == list(ShapeType)
        if len(self._types) > 1:
            return self._types.pop(0)
        return self._types[0]
