"""
Module physunits.serialization

Contains tools for converting measurements to dicts that can be serialized by
various methods (JSON, YAML, TOML, ...), as well as helpers to integrate with
the standard library ``json`` package.

Two forms are produced:

- the plain form ``{"baseValue": 1500.0}`` (``{"kelvinValue": v}`` for a
  ``Temperature``), which needs the family to be named when decoding;
- the tagged form ``{"__physunits.family__": "Mass", "baseValue": 1500.0}``,
  which the JSON helpers use so that ``loads`` can rebuild the right family.

Example:
    >>> payload = {"mass": Mass(1.5, MassUnit.KILOGRAMS), "note": "crate"}
    >>> text = dumps(payload)
    >>> loads(text)["mass"]
    <Mass: 1500 g>
"""

from __future__ import annotations

import json
from collections.abc import Mapping

from physunits.config import BASE_VALUE_KEY, FAMILY_KEY, KELVIN_VALUE_KEY
from physunits.core.measurement import Measurement
from physunits.core.unit_base import FamilyMember
from physunits.exceptions import MeasurementDecodeError
from physunits.logger import logger
from physunits.unit.unit_temperature import Temperature

# These are implemented as separate functions so that they can be used in
# other serialization routines as well.


def to_dict(value: Measurement | Temperature) -> dict:
    """Convert a measurement to its plain dict form.

    Args:
        value: Any measurement, or a ``Temperature``.

    Returns:
        dict: ``{"baseValue": v}``, or ``{"kelvinValue": v}`` for temperatures.

    Raises:
        TypeError: If ``value`` is not a measurement.
    """
    if isinstance(value, Temperature):
        return {KELVIN_VALUE_KEY: float(value)}
    if isinstance(value, Measurement):
        return {BASE_VALUE_KEY: float(value)}
    raise TypeError(f"cannot serialize {type(value).__name__} as a measurement")


def _fail(message: str):
    logger.debug("decode failure: %s", message)
    raise MeasurementDecodeError(message)


def from_dict(data: Mapping, family: type):
    """Convert the dict made by ``to_dict`` back into a measurement of ``family``.

    Raises:
        TypeError: If ``family`` is not a measurement class.
        MeasurementDecodeError: If the value key is missing or its value is
            not a number (booleans are rejected).
    """
    if not (isinstance(family, type) and issubclass(family, (Measurement, Temperature))):
        raise TypeError(f"cannot decode into {family!r}: not a measurement class")
    key = KELVIN_VALUE_KEY if issubclass(family, Temperature) else BASE_VALUE_KEY
    if not isinstance(data, Mapping):
        _fail(f"expected a mapping for {family.__name__}, got {type(data).__name__}")
    if key not in data:
        _fail(f"missing key {key!r} for {family.__name__}")
    raw = data[key]
    if isinstance(raw, bool) or not isinstance(raw, (int, float)):
        _fail(f"{key!r} must be a number, got {type(raw).__name__}")
    if issubclass(family, Temperature):
        return family.from_kelvin(float(raw))
    return family.from_base(float(raw))


def family_named(name: str) -> type:
    """Return the family root class registered under ``name``."""
    if not isinstance(name, str):
        _fail(f"family tag must be a string, got {type(name).__name__}")
    if name == Temperature.__name__:
        return Temperature
    try:
        return Measurement.families[name]
    except KeyError:
        _fail(f"unknown measurement family {name!r}")


def to_tagged_dict(value: Measurement | Temperature) -> dict:
    """Plain dict form plus the family tag."""
    return {FAMILY_KEY: type(value).ROOT.__name__, **to_dict(value)}


#####################
### JSON-SPECIFIC ###
#####################


def object_hook(dct: dict):
    """Can be used for the object_hook parameter in json.loads"""
    if FAMILY_KEY in dct:
        return from_dict(dct, family_named(dct[FAMILY_KEY]))
    return dct


def _tag(obj):
    # Measurements are floats, so json would write them as bare numbers
    # without ever calling ``default``.
    if isinstance(obj, FamilyMember) and isinstance(obj, float):
        return to_tagged_dict(obj)
    if isinstance(obj, dict):
        return {k: _tag(v) for k, v in obj.items()}
    if isinstance(obj, (list, tuple)):
        return [_tag(v) for v in obj]
    return obj


class MeasurementJSONEncoder(json.JSONEncoder):
    def iterencode(self, o, _one_shot=False):
        return super().iterencode(_tag(o), _one_shot)


class MeasurementJSONDecoder(json.JSONDecoder):
    def __init__(self, *args, **kwargs):
        super().__init__(*args, object_hook=object_hook, **kwargs)


def dumps(obj, **kwargs) -> str:
    """``json.dumps`` with measurements written in tagged form."""
    return json.dumps(obj, cls=MeasurementJSONEncoder, **kwargs)


def loads(text: str, **kwargs):
    """``json.loads`` rebuilding tagged measurements."""
    return json.loads(text, cls=MeasurementJSONDecoder, **kwargs)
