"""A scalar field stored as one value per grid cell."""


class VectorLinearField:
    """Cell values of a field on a regular grid of spacing ``gridlength``.

    ``values`` may be any iterable, including another field; it is copied.
    """

    def __init__(self, values, gridlength):
        self._values = list(values)
        self.gridlength = gridlength

    def _index(self, z):
        return int(z / self.gridlength)

    def __call__(self, z, dz):
        return self._values[self._index(z)]

    def change(self, z, dz, dv):
        """Add ``dv`` scaled by ``dz / gridlength`` to the cell at ``z``."""
        self._values[self._index(z)] += dv * dz / self.gridlength
        return self

    def advect(self, w, dt):
        """Advance one first-order upwind step with the velocity field ``w``."""
        old = self._values
        new = list(old)
        scale = dt / self.gridlength
        for i in range(1, len(old) - 1):
            a_lo = w(i * self.gridlength, self.gridlength)
            a_hi = w((i + 1) * self.gridlength, self.gridlength)
            new[i] += scale * a_lo * (old[i] if a_lo < 0 else old[i - 1])
            new[i] -= scale * a_hi * (old[i + 1] if a_hi < 0 else old[i])
        self._values = new
        return self

    def __getitem__(self, i):
        return self._values[i]

    def __len__(self):
        return len(self._values)

    def __iter__(self):
        return iter(self._values)

    def __str__(self):
        return " ".join(str(v) for v in self._values)

    def __repr__(self):
        return f"VectorLinearField({self._values!r}, {self.gridlength!r})"