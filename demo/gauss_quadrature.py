r"""
Evaluate a definite integral with Gauss-Legendre quadrature

    \int_a^b f(x) dx

Call with N, a and b, and optionally an expression for f (default x**3)

    python gauss_quadrature.py 4 0 2 "sin(x)"

"""
import sys
from gaussquad import legendre_coefficients, format_polynomial, parity, \
    find_roots, compute_weights, integrate, integrand

assert len(sys.argv) in (4, 5), 'Call with N, a, b and optionally f(x)'

N = int(sys.argv[1])
a = float(sys.argv[2])
b = float(sys.argv[3])
f = integrand(sys.argv[4] if len(sys.argv) == 5 else 'x**3')

if N <= 0:
    sys.exit(0)

coef = legendre_coefficients(N)
m = parity(N)
print("The Legendre's Polynomial is : " + format_polynomial(coef))

roots, diagnostics = find_roots(coef, N, m)
for d in diagnostics:
    print("For i=%d used epsilon: %g" % d)
weights = compute_weights(roots, coef, N, m)

print("Roots\t\t\t\tWeights")
for xi, wi in zip(roots, weights):
    print("%.15g\t\t%.15g" % (xi, wi))

print("The Value of Integration is = %.10g" % integrate(N, a, b, f))
