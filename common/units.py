"""
Unit Registry for Distance Reporting.

This module provides a centralized unit system using the `pint` library.
Geodesic computations always work in meters; callers ask for other length
units by name and the conversion goes through the shared registry, so an
incompatible unit (e.g. "degrees") fails loudly instead of returning a
silently wrong number.

Example Usage
-------------
>>> from common.units import convert_length
>>> round(convert_length(1609.344, 'miles'), 6)
1.0
"""

from typing import Union

import pint
from pint import UnitRegistry as PintUnitRegistry

# Create the global unit registry
ureg = PintUnitRegistry()

# Convenience alias for creating quantities
Q_ = ureg.Quantity

# Internal unit for every distance produced by the kernel
BASE_LENGTH_UNIT = "meter"


def convert_length(value_m: Union[float, "pint.Quantity"], units: str) -> float:
    """Convert a length in meters to the requested unit.

    Parameters
    ----------
    value_m : float or pint.Quantity
        Length in meters (bare number) or a pint length quantity.
    units : str
        Target unit name understood by pint (e.g. 'kilometers', 'miles',
        'nautical_mile').

    Returns
    -------
    float
        Magnitude in the target unit.

    Raises
    ------
    ValueError
        If ``units`` is unknown or is not a length unit.
    """
    quantity = value_m if isinstance(value_m, pint.Quantity) else Q_(value_m, BASE_LENGTH_UNIT)
    try:
        return float(quantity.to(units).magnitude)
    except pint.errors.UndefinedUnitError as e:
        raise ValueError(f"Unknown unit '{units}'") from e
    except pint.DimensionalityError as e:
        raise ValueError(
            f"Unit '{units}' is not a length unit"
        ) from e
