"""Advection schemes for a scalar profile on a regular grid.

Every scheme updates the profile ``q`` in place. ``w`` holds the vertical
velocity at the levels; the upwind schemes use only ``w[0]``.
"""


def advect_first_order(q, w, gridlength, dt):
    """Flux-form first-order upwind step with velocities at the cell boundaries.

    The first and last cells are left unchanged. Raises ``ValueError`` when
    the CFL criterion is broken.
    """
    scale = dt / gridlength
    q_lo = q[0]
    w_lo = w[0]
    for i in range(1, len(q) - 1):
        q_cur_old = q[i]
        w_hi = w[i]
        q_hi = q[i + 1]
        if w_lo < 0:
            q[i] += scale * w_lo * q_cur_old
        else:
            q[i] += scale * w_lo * q_lo
        if w_hi < 0:
            q[i] -= scale * w_hi * q_hi
        else:
            q[i] -= scale * w_hi * q_cur_old
        if abs(w_lo * dt / gridlength) > 1 or abs(w_hi * dt / gridlength) > 1:
            raise ValueError("The CFL crit. is broken")
        q_lo = q_cur_old
        w_lo = w_hi


def _first_order_down(q, w, scale):
    q_hi = q[-1]
    for i in range(len(q) - 2, -1, -1):
        q_cur = q[i]
        q[i] -= scale * w * (q_hi - q_cur)
        q_hi = q_cur


def _second_order_up(q, w, scale):
    q_2lo = q[0]
    q_1lo = q[1]
    for i in range(2, len(q)):
        q_cur = q[i]
        q[i] -= scale * w * (3.0 * q_cur - 4.0 * q_1lo + q_2lo) / 2.0
        q_2lo = q_1lo
        q_1lo = q_cur


def first_order_upwind(q, w, gridlength, dt):
    """First-order upwind step with the uniform velocity ``w[0]``."""
    velocity = w[0]
    scale = dt / gridlength
    if velocity > 0:
        q_lo = q[0]
        for i in range(1, len(q)):
            q_cur = q[i]
            q[i] -= scale * velocity * (q_cur - q_lo)
            q_lo = q_cur
    if velocity < 0:
        _first_order_down(q, velocity, scale)


def second_order_upwind(q, w, gridlength, dt):
    """Second-order upwind step with the uniform velocity ``w[0]``."""
    velocity = w[0]
    scale = dt / gridlength
    if velocity > 0:
        _second_order_up(q, velocity, scale)
    if velocity < 0:
        q_2lo = q[-1]
        q_1lo = q[-2]
        for i in range(len(q) - 3, -1, -1):
            q_cur = q[i]
            q[i] -= scale * velocity * (-3 * q_cur + 4 * q_1lo - q_2lo) / 2.0
            q_2lo = q_1lo
            q_1lo = q_cur


def second_first_order_upwind(q, w, gridlength, dt):
    """Second-order upwind for updrafts, first-order upwind for downdrafts."""
    velocity = w[0]
    scale = dt / gridlength
    if velocity > 0:
        _second_order_up(q, velocity, scale)
    if velocity < 0:
        _first_order_down(q, velocity, scale)


def third_order_upwind(q, w, gridlength, dt):
    """Third-order upwind-biased step with the uniform velocity ``w[0]``."""
    velocity = w[0]
    scale = dt / gridlength
    n = len(q)
    if velocity > 0:
        q_2lo = q[0]
        q_1lo = q[1]
        for i in range(2, n - 1):
            q_cur = q[i]
            q_hi = q[i + 1]
            q[i] -= scale * velocity * (2 * q_hi + 3 * q_cur - 6 * q_1lo + q_2lo) / 6.0
            q_2lo = q_1lo
            q_1lo = q_cur
    if velocity < 0:
        q_2lo = q[-1]
        q_1lo = q[-2]
        for i in range(n - 3, 0, -1):
            q_cur = q[i]
            q_hi = q[i - 1]
            q[i] -= scale * velocity * (-2 * q_hi - 3 * q_cur + 6 * q_1lo - q_2lo) / 6.0
            q_2lo = q_1lo
            q_1lo = q_cur


def sixth_order_wickerskamarock(q, w, gridlength, dt):
    """Sixth-order flux stencil after Wicker and Skamarock with velocity ``w[0]``."""
    velocity = w[0]
    scale = dt / gridlength
    old = list(q)
    n = len(old)
    if velocity > 0:
        for i in range(3, n - 2):
            q[i] -= scale * velocity * (
                37 * (old[i] + old[i - 1])
                - 8 * (old[i + 1] + old[i - 2])
                + (old[i + 2] + old[i - 3])
            ) / 60.0
    if velocity < 0:
        # Mirror image of the updraft stencil, walking down from the top.
        for i in range(n - 4, 1, -1):
            q[i] += scale * velocity * (
                37 * (old[i] + old[i + 1])
                - 8 * (old[i - 1] + old[i + 2])
                + (old[i - 2] + old[i + 3])
            ) / 60.0