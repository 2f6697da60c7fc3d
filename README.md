# threehalves

Monte Carlo option pricing under the 3/2 stochastic volatility model:

    dS_t / S_t = r dt + sqrt(V_t) rho dW1 + sqrt(V_t (1 - rho^2)) dW2
    dV_t       = kappa V_t (theta - V_t) dt + epsilon V_t^(3/2) dW1

`ThreeHalvesProcess` steps the price exactly. It draws the inverse variance
from a non-central chi-squared law. It draws the integrated variance by
inverting its characteristic function, which is built on the modified Bessel
function of the first kind of complex order. European, barrier and Asian
options are priced from the simulated prices or paths. A
`GeometricBrownianMotion` process is included as a simple reference.

## Installation

    pip install .

No third-party libraries are needed at run time. To run the tests:

    pip install .[test]
    pytest

## Pricing with the factory

A `Factory` (in `threehalves.factory`) ties a process class, a pricing
engine class and an option class together. Parameters are stored by name in
an `Arguments` mapping (`threehalves.arguments`). `build()` creates the
option, the process and the engine from that mapping, in that order.

```python
from threehalves.factory import Factory
from threehalves.p32 import ThreeHalvesProcess
from threehalves.engines import MonteCarloEngine
from threehalves.options import EuropeanOption

factory = Factory(ThreeHalvesProcess, MonteCarloEngine, EuropeanOption)
for key, value in {
    "CP": "CALL",
    "r": 0.05,
    "rho": -0.5,
    "kappa": 2.0,
    "theta": 1.5,
    "epsilon": 0.2,
    "dt": 1.0,
    "S0": 1.0,
    "V0": 1.125,
    "nos": 2560,
    "T": 1.0,
    "K": 1.0,
}.items():
    factory.set(key, value)

factory.build()
print(factory.price())
```

After `build()`, the built parts are available as the properties
`factory.option`, `factory.process` and `factory.engine`. The argument store
is available as `factory.arguments`. If you read those parts or call
`price()` before `build()`, you get `FactoryNotBuiltError`. If a parameter
that is needed was never set, you get `RequiredArgumentMissing`. Both live in
`threehalves.exceptions`, and every error in the package derives from
`PricingError`.

`factory.prompt()` asks for every parameter that the chosen process, engine
and option list in their `parameters()` and that is not set yet. It prompts
as `name(type) : ` and repeats after an `err` line until the answer parses.
It reads from standard input by default. You can pass a `reader` callable
(returning a line) and a `writer` callable instead.

Set `"verbose"` to `True` to print progress, the result, the standard error
and the processor time of each run. If a `CSVLogger` (`threehalves.csvlogger`)
is stored under `"csv"`, every verbose run appends one row to its file. The
row holds the simulation count, the time used, the result and the standard
error. If `"obv"` names a parameter, that parameter's value is appended as
well. If `"dbg"` holds a writable stream, every payoff is written to it.

### Options (`threehalves.options`)

* `EuropeanOption`: `K`, `T`, `CP` (`"CALL"` or `"PUT"`). Building it from
  arguments sets `"simp"`, so the engine simulates a single step per draw.
* `BarrierOption`: `K`, `T`, `B` (barrier level), `CP`, `UD` (`"UP"` or
  `"DOWN"`) and `IO` (`"IN"` or `"OUT"`). It is priced from a simulated
  `Path`.
* `AsianOption`: `T`, `CP`, `FF` (`"RATE"` or `"STRIKE"`) and `AG` (`"ARI"`
  or `"GEO"`). `K` is used only for `"RATE"` options. It is priced from a
  simulated `Path`.
* `Option`: a generic option whose payoff is the callable stored under
  `"payoff"`.

An unknown option type raises `OptionTypeError`.

### Processes

* `ThreeHalvesProcess` (`threehalves.p32`) needs `r`, `rho`, `kappa`,
  `theta`, `epsilon`, `dt`, `S0` and `V0`. It simulates single steps and
  whole paths (`simulate_path`). Out-of-range parameters raise `ValueError`.
* `GeometricBrownianMotion` (`threehalves.pgbm`) needs `mu`, `sigma`, `S0`
  and `dt`. It simulates single steps only, so it can price European options
  but not path-dependent ones.

### Engines (`threehalves.engines`)

`MonteCarloEngine` needs `nos` (the number of simulations), `T` and `r`. It
returns the mean payoff discounted by `exp(-r T)`. After a run it holds
`std_err` and `elapsed` (processor seconds). The bare `PricingEngine`
returns 0.0.

## Building blocks

```python
from threehalves.bessel import bessel_i
from threehalves.path import Path

print(bessel_i(complex(0.331, 0.68), 1.22))

path = Path(0.0, 1.0, 4.0, [1.0, 1.2, 0.9, 1.1, 1.3])
print(path.arithmetic_avg(), path.max(), path.breaks_down(1.0))
```

`threehalves.util` holds the numerical helpers used throughout:

* finite-difference derivatives: `diff`, `numerical_diff`, `numerical_diff2`;
* random draws: `normal_rnd`, `chi2_rnd`, `nc_chi2_rnd`, `uni_rnd`;
* `rvs`, a damped Newton search used for inverse transform sampling.

Call `threehalves.util.seed(value)` to make runs reproducible.

## Command line

    threehalves --help
    threehalves benchmark --csv data/benchmark.csv --simulations 2560
    threehalves sweep --kind PUT --direction UP --knock OUT --dir data

`benchmark` is the default command. It prices an at-the-money European call
under the 3/2 model with 2560, 10240 and 40960 simulations, or with the
counts given by `--sizes`. It logs each run to the CSV file.

`sweep` prices a barrier option (K = 1, B = 1.5, T = 7.2, dt = 0.8) for rho
from -1 to 1 in steps of 0.05. It logs each run, with its rho, to
`B<kind>rho<direction><knock><suffix>.csv` in the chosen directory.

The same runs can be started from Python with `threehalves.app.benchmark`
and `threehalves.app.rho_sweep`.

## What it does not do

There are no closed-form prices: every price is a Monte Carlo estimate.
There is no plotting or analysis of the CSV files the runs produce.