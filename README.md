# columncloud

A one-dimensional column model of warm clouds, written as a plain Python
library with no third-party dependencies. Cloud droplets are tracked as
superparticles that nucleate from a supersaturation table, grow or evaporate by
condensation, sediment, collide, and feel turbulent saturation fluctuations. The
vapour field above the cloud base is advected by one of several upwind schemes.

## Installation

```
pip install .
```

To run the tests as well:

```
pip install .[test]
pytest
```

## Modules

- `columncloud.grid` – `Grid`, a regular column of layers and levels.
- `columncloud.state` – `Layer`, `Level`, `State` and the initial profiles
  `linear_temperature`, `hydrostatic_pressure`, `exponential_qv`.
- `columncloud.thermodynamic` – saturation, nucleation (`will_nucleate`,
  `critical_saturation`), `condensation`, droplet `radius` and `cloud_water`,
  `fall_speed`, and the `Tendencies` record.
- `columncloud.advection` – in-place schemes on lists: `advect_first_order`,
  `first_order_upwind`, `second_order_upwind`, `second_first_order_upwind`,
  `third_order_upwind`, `sixth_order_wickerskamarock`.
- `columncloud.advect` – solvers applying those schemes to a `State`
  (`AdvectFirstOrder`, `AdvectAndSetFirstOrder`, `AdvectFirstOrderUpdraft`,
  `AdvectSecondOrderUpdraft`, `AdvectSecondFirstOrderUpdraft`,
  `AdvectThirdOrderUpdraft`, `AdvectSixthOrderWickerSkamarock`).
- `columncloud.superparticle` – `Superparticle`.
- `columncloud.analysis` – per-layer profiles: counts, cloud water, mean,
  maximal, minimal and effective radius, and supersaturation.
- `columncloud.sedimentation` – `FallSpeedLU` and `NoFallSpeed`.
- `columncloud.efficiencies`, `columncloud.collision` – Hall collision kernel,
  `BoxCollisions`, `BoxCollisionAdapter`, `NoCollisions`,
  `make_hall_collisions`, `make_no_collisions`.
- `columncloud.tau_relax`, `columncloud.fluctuations` – phase relaxation time
  and the Markov supersaturation fluctuation solver.
- `columncloud.ns_table`, `columncloud.sources` – the activation table and the
  particle sources `Twomey`, `NoParticleSource`, `SuperParticleSourceConstHeight`.
- `columncloud.logger` – `Logger` and `StdoutLogger`.
- `columncloud.radiation` – background atmosphere reading and preparation of
  radiative transfer input.
- `columncloud.columnmodel` – `ColumnModel`, the time stepper.

## Using the building blocks

```python
from columncloud.grid import Grid
from columncloud.thermodynamic import critical_saturation, condensation
from columncloud.advection import first_order_upwind

grid = Grid(3000.0, 10.0)
print(grid.layer_index(1234.0))          # 123

print(critical_saturation(1e-6, 273.15))

tend = condensation(1e-3, 1e8, 1e-6, 0.01, 288.0, 0.0, 0.1)
print(tend.dqc, tend.dT)

q = [0.0, 1.0, 0.0]
first_order_upwind(q, [1.0], 1.0, 1.0)   # advects in place
print(q)                                  # [0.0, 0.0, 1.0]
```

## Running a simulation

A model is assembled in Python from its parts and driven with a logger:

```python
import random

from columncloud.advect import AdvectFirstOrderUpdraft
from columncloud.collision import NoCollisions
from columncloud.columnmodel import ColumnModel
from columncloud.fluctuations import NoFluctuationSolver
from columncloud.grid import Grid
from columncloud.logger import StdoutLogger
from columncloud.radiation import RadiationSolver
from columncloud.sedimentation import NoFallSpeed
from columncloud.sources import NoParticleSource
from columncloud.state import Layer, Level, State, hydrostatic_pressure, linear_temperature

grid = Grid(1000.0, 10.0)
layers = [Layer(linear_temperature(z, 286.0), hydrostatic_pressure(z, 1e5), 0.0, 0.0)
          for z in grid.layers]
levels = [Level(1.0, hydrostatic_pressure(z, 1e5)) for z in grid.levels]
state = State(0.0, layers, levels, grid, cloud_base=500.0, w_init=1.0)

rng = random.Random(1)
model = ColumnModel(
    state,
    NoParticleSource(rng, 1000, grid.n_lay),
    60.0,                                   # t_max [s]
    0.1,                                    # dt [s]
    RadiationSolver("afglus.dat", False, False),
    grid,
    AdvectFirstOrderUpdraft(1800.0),
    NoFluctuationSolver(),
    NoCollisions(),
    NoFallSpeed(),
)
model.run(StdoutLogger())
```

`ColumnModel.run` logs once at the start and then every 30 simulated seconds.
`StdoutLogger` prints per layer the height, radiative energy, pressure,
temperature, vapour mixing ratio, supersaturation, cloud water, mean and maximal
droplet radius and the number of nucleated superparticles.

For activation of new droplets use `Twomey(rng, n_sp, n_lay, table_path)`,
where `table_path` names a text file of `s n` lines (supersaturation and number
of activated nuclei; lines starting with `#` are skipped). For turbulence use
`make_fluctuation_solver(rng, "markov", epsilon, l, grid)`; for collisions
`make_hall_collisions(FallSpeedLU())`.

## What the package does not do

- There is no command-line program and no configuration-file loader; a model
  is built in Python as shown above.
- Only output to standard output is provided. `create_logger` accepts a
  `"netcdf"` type but logs a warning and returns a `StdoutLogger`.
- There is no radiative transfer solver. `RadiationSolver` reads the background
  atmosphere and prepares the input profiles, but with `sw` or `lw` switched on
  `calculate_radiation` raises `RuntimeError`. Keep both off, or set the layer
  energy terms yourself with `RadiationSolver.apply_heating_rates`.