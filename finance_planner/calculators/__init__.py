"""Helper package that exposes the core financial calculators.

Each module is a small, stateless engine built around two public functions:

* ``validate(input)`` – returns a :class:`~.validation.ValidationResult` listing
  every invalid field at once.
* ``compute(input)`` – returns a result record; raises
  :class:`~.validation.InvalidInputError` when the input does not validate.

Modules:

* ``emergency_fund`` – reserve sized as a multiple of monthly fixed costs.
* ``first_million`` – monthly contribution needed to reach R$ 1.000.000.
* ``compound_interest`` – future value with monthly contributions plus a
  sampled value series for charts and exports.
* ``validation`` – the error convention shared by the three engines.
"""

from . import validation, emergency_fund, first_million, compound_interest  # noqa: F401

__all__ = ["validation", "emergency_fund", "first_million", "compound_interest"]
