"""Quick start example: minimax approximation of exp(x) with relative error."""

import math

import numpy as np

from pyminimax import Decimal128, FunctionTarget, MinimaxApproxExecutor, error_estimate

# exp on [0, 1], measured in relative error
target = FunctionTarget.from_floats(math.exp, math.exp, 0.0, 1.0)

result = MinimaxApproxExecutor.of(5).apply(target, verbose=True)
if result.is_empty():
    raise SystemExit(result.message())

poly = result.get()
print(f"\nCoefficients: {poly.float_coefficients()}")
print(f"Max relative error: {error_estimate(target, poly):.3e}")

xs = np.linspace(0.0, 1.0, 5)
for x, approx in zip(xs, poly.vectorized_eval(xs)):
    print(f"  x={x:.2f}  exact={math.exp(x):.12f}  approx={approx:.12f}")

# Same computation in 34-digit decimal arithmetic
decimal_target = FunctionTarget.from_floats(
    math.exp, math.exp, 0.0, 1.0, field=Decimal128.field()
)
decimal_poly = MinimaxApproxExecutor(5, iterations_per_step=100).apply(decimal_target).get()
print("\nDecimal128 coefficients:")
for i, c in enumerate(decimal_poly.coefficient()):
    print(f"  a{i} = {c}")
