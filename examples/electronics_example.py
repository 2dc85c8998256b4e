"""
Example sizing a battery-powered LED circuit with physunits.
"""

from physunits import (
    Charge,
    Current,
    Resistance,
    Voltage,
    VoltageUnit,
    power_from_current_resistance,
)
from physunits.collection import total
from physunits.serialization import dumps


def main():
    print("=" * 80)
    print("physunits - Electronics Example")
    print("=" * 80)

    supply = Voltage.USB
    forward_drop = Voltage(2, VoltageUnit.VOLTS)
    resistor = Resistance.LED_220

    # Ohm's law
    print("\nSolving the LED branch...")
    branch = (supply - forward_drop) / resistor
    print(f"Branch current:    {branch.formatted}")
    print(f"Resistor power:    {power_from_current_resistance(branch, resistor).formatted}")
    print(f"Drop on resistor:  {(branch * resistor).formatted}")

    # Battery runtime
    print("\n" + "-" * 80)
    print("Estimating runtime for four branches...")
    draw = total([branch] * 4)
    pack = Charge.from_milliampere_hours(2500)
    runtime = pack / draw
    print(f"Total draw: {draw.formatted}")
    print(f"Pack:       {pack.milliampere_hours:.0f} mAh")
    print(f"Runtime:    {runtime.formatted} ({runtime.formatted_hms})")
    print(f"Under USB 2.0 limit: {draw < Current.USB2_MAX}")

    # Serialization
    print("\n" + "-" * 80)
    print("Saving the design...")
    print(dumps({"supply": supply, "resistor": resistor, "runtime": runtime}, indent=2))

    print("\n" + "=" * 80)
    print("Example completed!")
    print("=" * 80)


if __name__ == "__main__":
    main()
