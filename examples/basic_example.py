"""
Basic example of using physunits.
"""

from physunits import (
    Acceleration,
    Duration,
    Length,
    LengthUnit,
    Mass,
    MassUnit,
    Temperature,
    TemperatureUnit,
    TimeUnit,
    UnitFamilyError,
)
from physunits.display import print_conversions


def main():
    print("=" * 80)
    print("physunits - Basic Example")
    print("=" * 80)

    # Construction and conversion
    print("\nConverting a payload mass...")
    payload = Mass(2.5, MassUnit.KILOGRAMS)
    print(f"Stored value: {payload}")
    print(f"In grams:     {payload.grams:.1f}")
    print(f"Formatted:    {payload.formatted}")

    # Cross-family arithmetic
    print("\n" + "-" * 80)
    print("Applying physical laws...")
    weight = payload * Acceleration.GRAVITY
    print(f"Weight:        {weight.formatted}")
    speed = Length(100, LengthUnit.METERS) / Duration(9.58, TimeUnit.SECONDS)
    print(f"Sprint speed:  {speed.formatted}")
    flight = Length(12, LengthUnit.KILOMETERS) / speed
    print(f"Flight time:   {flight.formatted_hms}")

    # Temperatures
    print("\n" + "-" * 80)
    print("Comparing temperatures...")
    morning = Temperature(12, TemperatureUnit.CELSIUS)
    noon = Temperature(68, TemperatureUnit.FAHRENHEIT)
    rise = noon - morning
    print(f"Morning: {morning.formatted}, noon: {noon.formatted}, rise: {rise.formatted}")

    # Family safety
    print("\n" + "-" * 80)
    print("Mixing families...")
    try:
        payload + Length(1, LengthUnit.METERS)
    except UnitFamilyError as e:
        print(f"Rejected: {e}")

    print("\n")
    print_conversions(payload)

    print("\n" + "=" * 80)
    print("Example completed!")
    print("=" * 80)


if __name__ == "__main__":
    main()
