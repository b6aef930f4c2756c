"""Example: Combining IMU readings reported in different axis conventions.

This example demonstrates:
1. Reading directional components regardless of storage order
2. Converting between named frames (NEU -> NED -> ENU)
3. Selecting a frame at runtime from a settings mapping
4. Remapping a time series of accelerometer samples
5. Mirrored frames and frame-relative base vectors
"""

import numpy as np

from coordframe import (
    EastNorthUp,
    FrameType,
    NorthEastDown,
    NorthEastUp,
    all_descriptors,
    construct_frame,
    flip_frame,
    parse_frame_settings,
)


def main() -> None:
    """Run coordinate frame conversion examples."""
    print("=" * 70)
    print("Axis-aligned Coordinate Frame Examples")
    print("=" * 70)

    # Example 1: Directional accessors
    print("\n1. Directional Accessors")
    print("-" * 70)

    neu = NorthEastUp(1.0, 2.0, 3.0)
    print(f"Value: {neu}")
    print(f"  north={neu.north}, east={neu.east}, up={neu.up}")
    print(f"  down={neu.down} (synthesized from up)")
    print(f"  right-handed: {neu.right_handed}")

    # Example 2: Conversion between named frames
    print("\n2. Frame Conversion")
    print("-" * 70)

    ned = neu.convert_to(NorthEastDown)
    enu = ned.convert_to(EastNorthUp)
    print(f"NEU -> NED: {ned}")
    print(f"NED -> ENU: {enu}")
    print(f"Round trip equal: {enu.convert_to(NorthEastUp) == neu}")

    # Example 3: Runtime frame selection
    print("\n3. Runtime Frame Selection")
    print("-" * 70)

    settings = parse_frame_settings(
        {
            "reference_frame": "NorthEastDown",
            "sensors": {
                "imu_wrist": {"frame": "EastNorthUp"},
                "imu_elbow": {"frame": "SouthWestDown"},
            },
        }
    )
    raw_readings = {
        "imu_wrist": [0.3, 0.1, 9.81],
        "imu_elbow": [-0.1, -0.3, -9.81],
    }
    for name, raw in raw_readings.items():
        sensor = settings.sensor(name)
        value = construct_frame(raw, sensor.frame_type)
        print(f"\n{name} ({sensor.frame_type.frame_name}): {raw}")
        print(f"  in reference frame: {settings.to_reference(name, raw)}")
        print(f"  up component: {value.up:.2f}")

    # Example 4: Time series remapping
    print("\n4. Time Series Remapping")
    print("-" * 70)

    t = np.linspace(0.0, 1.0, 5)
    acc_enu = np.column_stack([0.1 * np.sin(t), 0.1 * np.cos(t), np.full_like(t, 9.81)])
    acc_ned = settings.remap("imu_wrist", acc_enu)
    print(f"Accelerometer (ENU):\n{acc_enu}")
    print(f"Accelerometer (NED):\n{acc_ned}")

    # Example 5: Mirrored frames and base vectors
    print("\n5. Mirrored Frames and Base Vectors")
    print("-" * 70)

    mirrored = flip_frame(ned)
    print(f"flip(NED value): {mirrored}")
    print(f"  north still {mirrored.north}")
    print(f"NorthEastDown.z_axis(): {NorthEastDown.z_axis()}")
    print(f"EastNorthUp.z_axis():   {EastNorthUp.z_axis()}")

    right_handed = [d.name for d in all_descriptors() if d.right_handed]
    print(f"\n{len(right_handed)} of {len(all_descriptors())} frames are right-handed")
    print(f"Default frame: {FrameType.default().frame_name}")

    print("\n" + "=" * 70)
    print("Examples complete!")
    print("=" * 70)


if __name__ == "__main__":
    main()
