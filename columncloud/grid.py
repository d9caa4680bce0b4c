"""Regular vertical grid of layers and the levels bounding them."""

import math


class Grid:
    """A column of ``n_lay`` layers of equal thickness ``length`` up to ``height``."""

    __slots__ = ("height", "length", "n_lay", "n_lvl", "layers", "levels")

    def __init__(self, height, length):
        self.height = float(height)
        self.length = float(length)
        self.n_lay = math.ceil(self.height / self.length)
        self.n_lvl = self.n_lay + 1
        self.layers = tuple((i + 0.5) * self.length for i in range(self.n_lay))
        self.levels = tuple(i * self.length for i in range(self.n_lvl))

    def __repr__(self):
        return f"Grid(height={self.height!r}, length={self.length!r})"

    def layer_index(self, z):
        """Index of the layer containing height ``z``."""
        index = math.floor(z / self.length)
        if index < 0 or index > self.n_lay:
            raise IndexError(f"the grid index is out of range. index is: {index}")
        return index

    def level(self, i):
        """Height of level ``i``."""
        if 0 <= i <= self.n_lvl:
            return self.length * i
        raise IndexError("the lvl index is larger then the number of levels")

    def layer(self, i):
        """Height of the centre of layer ``i``."""
        if 0 <= i <= self.n_lay:
            return self.length * (i + 0.5)
        raise IndexError("the lay index is larger then the number of layers")