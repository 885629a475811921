"""V-speed regression coefficients and minimum control speed floors.

Floors are keyed by pressure altitude (ft); the VMU floor additionally by
takeoff weight (kg). Regression factors multiply the takeoff weight in
tonnes. Runway factors lead with the reference runway length (m) the
correction is measured from.
"""

from takeoffperf.interpolation import LookupTable
from takeoffperf.performance.types import PerConfiguration

MINIMUM_V1_VMC = LookupTable([
    (-2000, 122),
    (0, 121),
    (2000, 121),
    (3000, 120),
    (4000, 120),
    (6000, 118),
    (8000, 116),
    (9200, 115),
    (14000, 107),
    (15000, 106),
])

MINIMUM_VR_VMC = LookupTable([
    (-2000, 123),
    (0, 122),
    (3000, 122),
    (4000, 121),
    (6000, 120),
    (8000, 117),
    (9200, 116),
    (14000, 107),
    (15000, 106),
])

MINIMUM_V2_VMC = PerConfiguration(
    conf1=LookupTable([
        (-2000, 127),
        (0, 126),
        (1000, 126),
        (2000, 125),
        (3000, 125),
        (4000, 124),
        (6000, 123),
        (8000, 120),
        (9200, 118),
        (14000, 109),
        (15000, 107),
    ]),
    conf2=LookupTable([
        (-2000, 127),
        (0, 126),
        (1000, 126),
        (2000, 125),
        (3000, 125),
        (4000, 124),
        (6000, 123),
        (8000, 120),
        (9200, 118),
        (14000, 109),
        (15000, 107),
    ]),
    conf3=LookupTable([
        (-2000, 126),
        (0, 125),
        (1000, 125),
        (2000, 124),
        (3000, 124),
        (4000, 123),
        (6000, 122),
        (8000, 119),
        (9200, 117),
        (14000, 108),
        (15000, 106),
    ]),
)

MINIMUM_V2_VMU = PerConfiguration(
    conf1=LookupTable([
        ((-2000, 291_646), 127),
        ((-2000, 324_051), 127),
        ((-2000, 356_456), 127),
        ((-2000, 388_861), 132),
        ((-2000, 421_266), 137),
        ((-2000, 453_671), 142),
        ((-2000, 486_076), 146),
        ((-2000, 518_481), 151),
        ((-1000, 291_646), 126),
        ((-1000, 324_051), 126),
        ((-1000, 356_456), 127),
        ((-1000, 388_861), 132),
        ((-1000, 421_266), 137),
        ((-1000, 453_671), 142),
        ((-1000, 486_076), 147),
        ((-1000, 518_481), 151),
        ((0, 291_646), 126),
        ((0, 324_051), 126),
        ((0, 356_456), 127),
        ((0, 388_861), 132),
        ((0, 421_266), 137),
        ((0, 453_671), 142),
        ((0, 486_076), 147),
        ((0, 518_481), 151),
        ((1000, 291_646), 126),
        ((1000, 324_051), 126),
        ((1000, 356_456), 127),
        ((1000, 388_861), 132),
        ((1000, 421_266), 137),
        ((1000, 453_671), 142),
        ((1000, 486_076), 147),
        ((1000, 518_481), 151),
        ((2000, 291_646), 125),
        ((2000, 324_051), 125),
        ((2000, 356_456), 127),
        ((2000, 388_861), 132),
        ((2000, 421_266), 137),
        ((2000, 453_671), 142),
        ((2000, 486_076), 147),
        ((2000, 518_481), 151),
        ((3000, 291_646), 125),
        ((3000, 324_051), 125),
        ((3000, 356_456), 127),
        ((3000, 388_861), 132),
        ((3000, 421_266), 137),
        ((3000, 453_671), 142),
        ((3000, 486_076), 147),
        ((3000, 518_481), 151),
        ((4000, 291_646), 124),
        ((4000, 324_051), 124),
        ((4000, 356_456), 127),
        ((4000, 388_861), 132),
        ((4000, 421_266), 137),
        ((4000, 453_671), 142),
        ((4000, 486_076), 147),
        ((4000, 518_481), 152),
        ((5000, 291_646), 124),
        ((5000, 324_051), 124),
        ((5000, 356_456), 127),
        ((5000, 388_861), 132),
        ((5000, 421_266), 137),
        ((5000, 453_671), 142),
        ((5000, 486_076), 147),
        ((5000, 518_481), 152),
        ((6000, 291_646), 123),
        ((6000, 324_051), 123),
        ((6000, 356_456), 127),
        ((6000, 388_861), 132),
        ((6000, 421_266), 137),
        ((6000, 453_671), 142),
        ((6000, 486_076), 147),
        ((6000, 518_481), 152),
        ((7000, 291_646), 122),
        ((7000, 324_051), 122),
        ((7000, 356_456), 127),
        ((7000, 388_861), 132),
        ((7000, 421_266), 137),
        ((7000, 453_671), 142),
        ((7000, 486_076), 147),
        ((7000, 518_481), 152),
        ((8000, 291_646), 120),
        ((8000, 324_051), 121),
        ((8000, 356_456), 127),
        ((8000, 388_861), 132),
        ((8000, 421_266), 137),
        ((8000, 453_671), 143),
        ((8000, 486_076), 148),
        ((8000, 518_481), 152),
        ((9000, 291_646), 119),
        ((9000, 324_051), 121),
        ((9000, 356_456), 127),
        ((9000, 388_861), 132),
        ((9000, 421_266), 137),
        ((9000, 453_671), 143),
        ((9000, 486_076), 148),
        ((9000, 518_481), 153),
        ((10000, 291_646), 117),
        ((10000, 324_051), 121),
        ((10000, 356_456), 127),
        ((10000, 388_861), 132),
        ((10000, 421_266), 137),
        ((10000, 453_671), 143),
        ((10000, 486_076), 148),
        ((10000, 518_481), 153),
        ((11000, 291_646), 115),
        ((11000, 324_051), 121),
        ((11000, 356_456), 127),
        ((11000, 388_861), 132),
        ((11000, 421_266), 138),
        ((11000, 453_671), 143),
        ((11000, 486_076), 149),
        ((11000, 518_481), 154),
        ((12000, 291_646), 115),
        ((12000, 324_051), 121),
        ((12000, 356_456), 127),
        ((12000, 388_861), 132),
        ((12000, 421_266), 138),
        ((12000, 453_671), 143),
        ((12000, 486_076), 149),
        ((12000, 518_481), 154),
        ((13000, 291_646), 115),
        ((13000, 324_051), 121),
        ((13000, 356_456), 127),
        ((13000, 388_861), 132),
        ((13000, 421_266), 138),
        ((13000, 453_671), 144),
        ((13000, 486_076), 149),
        ((13000, 518_481), 154),
        ((14100, 291_646), 115),
        ((14100, 324_051), 121),
        ((14100, 356_456), 127),
        ((14100, 388_861), 132),
        ((14100, 421_266), 138),
        ((14100, 453_671), 144),
        ((14100, 486_076), 150),
        ((14100, 518_481), 155),
        ((15100, 291_646), 115),
        ((15100, 324_051), 121),
        ((15100, 356_456), 127),
        ((15100, 388_861), 133),
        ((15100, 421_266), 139),
        ((15100, 453_671), 144),
        ((15100, 486_076), 150),
        ((15100, 518_481), 155),
    ]),
    conf2=LookupTable([
        ((-2000, 291_646), 127),
        ((-2000, 324_051), 127),
        ((-2000, 356_456), 127),
        ((-2000, 388_861), 127),
        ((-2000, 421_266), 132),
        ((-2000, 453_671), 136),
        ((-2000, 486_076), 141),
        ((-2000, 518_481), 145),
        ((-1000, 291_646), 126),
        ((-1000, 324_051), 126),
        ((-1000, 356_456), 126),
        ((-1000, 388_861), 127),
        ((-1000, 421_266), 132),
        ((-1000, 453_671), 136),
        ((-1000, 486_076), 141),
        ((-1000, 518_481), 145),
        ((0, 291_646), 126),
        ((0, 324_051), 126),
        ((0, 356_456), 126),
        ((0, 388_861), 127),
        ((0, 421_266), 132),
        ((0, 453_671), 137),
        ((0, 486_076), 141),
        ((0, 518_481), 146),
        ((1000, 291_646), 126),
        ((1000, 324_051), 126),
        ((1000, 356_456), 126),
        ((1000, 388_861), 127),
        ((1000, 421_266), 132),
        ((1000, 453_671), 137),
        ((1000, 486_076), 141),
        ((1000, 518_481), 146),
        ((2000, 291_646), 125),
        ((2000, 324_051), 125),
        ((2000, 356_456), 125),
        ((2000, 388_861), 127),
        ((2000, 421_266), 132),
        ((2000, 453_671), 137),
        ((2000, 486_076), 141),
        ((2000, 518_481), 146),
        ((3000, 291_646), 125),
        ((3000, 324_051), 125),
        ((3000, 356_456), 125),
        ((3000, 388_861), 127),
        ((3000, 421_266), 132),
        ((3000, 453_671), 137),
        ((3000, 486_076), 142),
        ((3000, 518_481), 146),
        ((4000, 291_646), 124),
        ((4000, 324_051), 124),
        ((4000, 356_456), 124),
        ((4000, 388_861), 127),
        ((4000, 421_266), 132),
        ((4000, 453_671), 137),
        ((4000, 486_076), 142),
        ((4000, 518_481), 146),
        ((5000, 291_646), 124),
        ((5000, 324_051), 124),
        ((5000, 356_456), 124),
        ((5000, 388_861), 127),
        ((5000, 421_266), 132),
        ((5000, 453_671), 137),
        ((5000, 486_076), 142),
        ((5000, 518_481), 146),
        ((6000, 291_646), 123),
        ((6000, 324_051), 123),
        ((6000, 356_456), 123),
        ((6000, 388_861), 127),
        ((6000, 421_266), 132),
        ((6000, 453_671), 137),
        ((6000, 486_076), 142),
        ((6000, 518_481), 146),
        ((7000, 291_646), 122),
        ((7000, 324_051), 122),
        ((7000, 356_456), 122),
        ((7000, 388_861), 127),
        ((7000, 421_266), 132),
        ((7000, 453_671), 137),
        ((7000, 486_076), 142),
        ((7000, 518_481), 146),
        ((8000, 291_646), 120),
        ((8000, 324_051), 120),
        ((8000, 356_456), 122),
        ((8000, 388_861), 127),
        ((8000, 421_266), 132),
        ((8000, 453_671), 137),
        ((8000, 486_076), 142),
        ((8000, 518_481), 146),
        ((9000, 291_646), 119),
        ((9000, 324_051), 119),
        ((9000, 356_456), 122),
        ((9000, 388_861), 127),
        ((9000, 421_266), 132),
        ((9000, 453_671), 137),
        ((9000, 486_076), 142),
        ((9000, 518_481), 147),
        ((10000, 291_646), 117),
        ((10000, 324_051), 117),
        ((10000, 356_456), 122),
        ((10000, 388_861), 127),
        ((10000, 421_266), 132),
        ((10000, 453_671), 137),
        ((10000, 486_076), 142),
        ((10000, 518_481), 147),
        ((11000, 291_646), 115),
        ((11000, 324_051), 117),
        ((11000, 356_456), 122),
        ((11000, 388_861), 127),
        ((11000, 421_266), 132),
        ((11000, 453_671), 137),
        ((11000, 486_076), 142),
        ((11000, 518_481), 147),
        ((12000, 291_646), 113),
        ((12000, 324_051), 117),
        ((12000, 356_456), 122),
        ((12000, 388_861), 127),
        ((12000, 421_266), 132),
        ((12000, 453_671), 138),
        ((12000, 486_076), 143),
        ((12000, 518_481), 147),
        ((13000, 291_646), 111),
        ((13000, 324_051), 116),
        ((13000, 356_456), 122),
        ((13000, 388_861), 127),
        ((13000, 421_266), 133),
        ((13000, 453_671), 138),
        ((13000, 486_076), 143),
        ((13000, 518_481), 148),
        ((14100, 291_646), 111),
        ((14100, 324_051), 116),
        ((14100, 356_456), 122),
        ((14100, 388_861), 127),
        ((14100, 421_266), 133),
        ((14100, 453_671), 138),
        ((14100, 486_076), 143),
        ((14100, 518_481), 148),
        ((15100, 291_646), 111),
        ((15100, 324_051), 116),
        ((15100, 356_456), 122),
        ((15100, 388_861), 127),
        ((15100, 421_266), 133),
        ((15100, 453_671), 138),
        ((15100, 486_076), 143),
        ((15100, 518_481), 148),
    ]),
    conf3=LookupTable([
        ((-2000, 291_646), 126),
        ((-2000, 324_051), 126),
        ((-2000, 356_456), 126),
        ((-2000, 388_861), 126),
        ((-2000, 421_266), 128),
        ((-2000, 453_671), 132),
        ((-2000, 486_076), 137),
        ((-2000, 518_481), 141),
        ((-1000, 291_646), 125),
        ((-1000, 324_051), 125),
        ((-1000, 356_456), 125),
        ((-1000, 388_861), 125),
        ((-1000, 421_266), 128),
        ((-1000, 453_671), 132),
        ((-1000, 486_076), 137),
        ((-1000, 518_481), 141),
        ((0, 291_646), 125),
        ((0, 324_051), 125),
        ((0, 356_456), 125),
        ((0, 388_861), 125),
        ((0, 421_266), 128),
        ((0, 453_671), 132),
        ((0, 486_076), 137),
        ((0, 518_481), 141),
        ((1000, 291_646), 125),
        ((1000, 324_051), 125),
        ((1000, 356_456), 125),
        ((1000, 388_861), 125),
        ((1000, 421_266), 128),
        ((1000, 453_671), 132),
        ((1000, 486_076), 137),
        ((1000, 518_481), 141),
        ((2000, 291_646), 124),
        ((2000, 324_051), 124),
        ((2000, 356_456), 124),
        ((2000, 388_861), 124),
        ((2000, 421_266), 128),
        ((2000, 453_671), 132),
        ((2000, 486_076), 137),
        ((2000, 518_481), 141),
        ((3000, 291_646), 124),
        ((3000, 324_051), 124),
        ((3000, 356_456), 124),
        ((3000, 388_861), 124),
        ((3000, 421_266), 128),
        ((3000, 453_671), 133),
        ((3000, 486_076), 137),
        ((3000, 518_481), 141),
        ((4000, 291_646), 123),
        ((4000, 324_051), 123),
        ((4000, 356_456), 123),
        ((4000, 388_861), 123),
        ((4000, 421_266), 128),
        ((4000, 453_671), 133),
        ((4000, 486_076), 137),
        ((4000, 518_481), 141),
        ((5000, 291_646), 123),
        ((5000, 324_051), 123),
        ((5000, 356_456), 123),
        ((5000, 388_861), 123),
        ((5000, 421_266), 128),
        ((5000, 453_671), 133),
        ((5000, 486_076), 137),
        ((5000, 518_481), 142),
        ((6000, 291_646), 122),
        ((6000, 324_051), 122),
        ((6000, 356_456), 122),
        ((6000, 388_861), 123),
        ((6000, 421_266), 128),
        ((6000, 453_671), 133),
        ((6000, 486_076), 137),
        ((6000, 518_481), 142),
        ((7000, 291_646), 121),
        ((7000, 324_051), 121),
        ((7000, 356_456), 121),
        ((7000, 388_861), 123),
        ((7000, 421_266), 128),
        ((7000, 453_671), 133),
        ((7000, 486_076), 138),
        ((7000, 518_481), 142),
        ((8000, 291_646), 119),
        ((8000, 324_051), 119),
        ((8000, 356_456), 119),
        ((8000, 388_861), 123),
        ((8000, 421_266), 128),
        ((8000, 453_671), 133),
        ((8000, 486_076), 138),
        ((8000, 518_481), 142),
        ((9000, 291_646), 118),
        ((9000, 324_051), 118),
        ((9000, 356_456), 118),
        ((9000, 388_861), 123),
        ((9000, 421_266), 128),
        ((9000, 453_671), 133),
        ((9000, 486_076), 138),
        ((9000, 518_481), 142),
        ((10000, 291_646), 116),
        ((10000, 324_051), 116),
        ((10000, 356_456), 118),
        ((10000, 388_861), 123),
        ((10000, 421_266), 128),
        ((10000, 453_671), 133),
        ((10000, 486_076), 138),
        ((10000, 518_481), 142),
        ((11000, 291_646), 114),
        ((11000, 324_051), 114),
        ((11000, 356_456), 118),
        ((11000, 388_861), 123),
        ((11000, 421_266), 128),
        ((11000, 453_671), 133),
        ((11000, 486_076), 138),
        ((11000, 518_481), 142),
        ((12000, 291_646), 112),
        ((12000, 324_051), 113),
        ((12000, 356_456), 118),
        ((12000, 388_861), 123),
        ((12000, 421_266), 128),
        ((12000, 453_671), 133),
        ((12000, 486_076), 138),
        ((12000, 518_481), 143),
        ((13000, 291_646), 110),
        ((13000, 324_051), 113),
        ((13000, 356_456), 118),
        ((13000, 388_861), 123),
        ((13000, 421_266), 128),
        ((13000, 453_671), 133),
        ((13000, 486_076), 138),
        ((13000, 518_481), 143),
        ((14100, 291_646), 108),
        ((14100, 324_051), 113),
        ((14100, 356_456), 118),
        ((14100, 388_861), 123),
        ((14100, 421_266), 128),
        ((14100, 453_671), 134),
        ((14100, 486_076), 139),
        ((14100, 518_481), 143),
        ((15100, 291_646), 107),
        ((15100, 324_051), 113),
        ((15100, 356_456), 118),
        ((15100, 388_861), 123),
        ((15100, 421_266), 129),
        ((15100, 453_671), 134),
        ((15100, 486_076), 139),
        ((15100, 518_481), 143),
    ]),
)

V2_RUNWAY_VMCG_BASE_FACTORS = PerConfiguration(
    conf1=(0.920413, 77.3469),
    conf2=(0.87805, 75.1346),
    conf3=(0.96131, 65.525),
)

V2_RUNWAY_VMCG_ALT_FACTORS = PerConfiguration(
    conf1=(0.00002333, -0.00144),
    conf2=(0.00001713, -0.001057),
    conf3=(0.00001081, -0.0006236),
)

VR_RUNWAY_VMCG_BASE_FACTORS = PerConfiguration(
    conf1=(0.83076, 81.086),
    conf2=(0.728085, 84.111),
    conf3=(0.742761, 78.721),
)

VR_RUNWAY_VMCG_RUNWAY_FACTORS = PerConfiguration(
    conf1=(2280, 0.0001718, -0.01585),
    conf2=(2280, 0.0003239, -0.027272),
    conf3=(1900, 0.00057992, -0.045646),
)

VR_RUNWAY_VMCG_ALT_FACTORS = PerConfiguration(
    conf1=(0.000029048, -0.001958),
    conf2=(0.000035557, -0.0025644),
    conf3=(1.02964e-5, -0.000545643),
)

VR_RUNWAY_VMCG_SLOPE_FACTORS = PerConfiguration(
    conf1=0.000887,
    conf2=0.000887,
    conf3=0.000887,
)

VR_RUNWAY_VMCG_HEADWIND_FACTORS = PerConfiguration(
    conf1=(0, 0),
    conf2=(-0.027617, 2.1252),
    conf3=(0.003355, -0.263036),
)

VR_RUNWAY_VMCG_TAILWIND_FACTORS = PerConfiguration(
    conf1=(-0.008052, 0.6599),
    conf2=(-0.010709, 0.90273),
    conf3=(-0.027796, 2.107178),
)

V1_RUNWAY_VMCG_BASE_FACTORS = PerConfiguration(
    conf1=(0.4259042, 106.763),
    conf2=(0.398826, 106.337),
    conf3=(0.469648, 95.776),
)

V1_RUNWAY_VMCG_RUNWAY_FACTORS = PerConfiguration(
    conf1=(2280, 0.0003156, -0.03189),
    conf2=(2280, 0.0004396, -0.041238),
    conf3=(1900, 0.00144, -0.112592),
)

V1_RUNWAY_VMCG_ALT_FACTORS = PerConfiguration(
    conf1=(0.00003416, -0.0028035),
    conf2=(0.00004354, -0.0035876),
    conf3=(0.0000847, -0.006666),
)

V1_RUNWAY_VMCG_SLOPE_FACTORS = PerConfiguration(
    conf1=0.000887,
    conf2=0.000887,
    conf3=0.000887,
)

V1_RUNWAY_VMCG_HEADWIND_FACTORS = PerConfiguration(
    conf1=(0.00526, -0.2105),
    conf2=(0.00974, -0.53),
    conf3=(0.002333, -0.079528),
)

V1_RUNWAY_VMCG_TAILWIND_FACTORS = PerConfiguration(
    conf1=(-0.009243, 1.108),
    conf2=(-0.008207, 1.07),
    conf3=(-0.043516, 3.423),
)

V2_SECOND_SEG_BRAKE_THRESHOLDS = PerConfiguration(
    conf1=(-0.009368, 186.79),
    conf2=(0.02346, 68.33),
    conf3=(0.022112, 83.141),
)

V2_SECOND_SEG_BRAKE_BASE_TABLE1 = PerConfiguration(
    conf1=(0.72637, 101.077),
    conf2=(0.74005, 97.073),
    conf3=(0.3746, 130.078),
)

V2_SECOND_SEG_BRAKE_BASE_TABLE2 = PerConfiguration(
    conf1=(0.63964, 102.127),
    conf2=(0.692636, 92.9863),
    conf3=(0.859926, 82.4377),
)

V2_SECOND_SEG_BRAKE_RUNWAY_TABLE1 = PerConfiguration(
    conf1=(3180, -0.015997),
    conf2=(3180, -0.014862),
    conf3=(3180, -0.019296),
)

V2_SECOND_SEG_BRAKE_RUNWAY_TABLE2 = PerConfiguration(
    conf1=(3180, -0.003612),
    conf2=(3180, -0.007),
    conf3=(3180, -0.013),
)

V2_SECOND_SEG_BRAKE_ALT_FACTORS = PerConfiguration(
    conf1=(-0.00000924, -0.00075879, 0.000546, -1.075),
    conf2=(-0.00000387, -0.0009333, 0.000546, -1.075),
    conf3=(0.000034, -0.004043, 0.000468, -0.778471),
)

V2_SECOND_SEG_BRAKE_SLOPE_FACTORS = PerConfiguration(
    conf1=(0.0000571, -0.008306),
    conf2=(0.0000286, -0.00415),
    conf3=(0.000001, -0.000556),
)

V2_SECOND_SEG_BRAKE_HEADWIND_FACTORS = PerConfiguration(
    conf1=0.2,
    conf2=0.2,
    conf3=0.2,
)

V2_SECOND_SEG_BRAKE_TAILWIND_FACTORS = PerConfiguration(
    conf1=0.65,
    conf2=0.5,
    conf3=0.7,
)

VR_SECOND_SEG_BRAKE_BASE_TABLE1 = PerConfiguration(
    conf1=(0.701509, 102.667),
    conf2=(0.696402, 100.226),
    conf3=(0.381534, 129.61),
)

VR_SECOND_SEG_BRAKE_BASE_TABLE2 = PerConfiguration(
    conf1=(0.573107, 105.783),
    conf2=(0.932193, 115.336),
    conf3=(0.572407, 105.428),
)

VR_SECOND_SEG_BRAKE_RUNWAY_TABLE1 = PerConfiguration(
    conf1=(3180, -0.000181, -0.005195),
    conf2=(3180, -0.000225, -0.000596),
    conf3=(3180, 0.000054, -0.024442),
)

VR_SECOND_SEG_BRAKE_RUNWAY_TABLE2 = PerConfiguration(
    conf1=(3180, 0.004582, -0.395175),
    conf2=(3180, 0.000351, -0.03216),
    conf3=(3180, -0.000263, 0.014135),
)

VR_SECOND_SEG_BRAKE_ALT_TABLE1 = PerConfiguration(
    conf1=(-0.000034, 0.001018, 0.000154, 0.415385),
    conf2=(-0.00001, -0.000253, 0.000328, -0.24493),
    conf3=(0.000017, -0.003017, 0.000398, -0.5117),
)

VR_SECOND_SEG_BRAKE_ALT_TABLE2 = PerConfiguration(
    conf1=(0.000574, -0.047508, 0.000154, 0.415385),
    conf2=(0.000253, -0.019907, 0.000328, -0.24493),
    conf3=(0.000247, -0.019502, 0.000398, -0.5117),
)

VR_SECOND_SEG_BRAKE_SLOPE_FACTORS = PerConfiguration(
    conf1=(0.000293, -0.023877),
    conf2=(0.000309, -0.025884),
    conf3=(0.000049, -0.005035),
)

VR_SECOND_SEG_BRAKE_HEADWIND_FACTORS = PerConfiguration(
    conf1=(0.00668, -0.30215),
    conf2=(0.015247, -0.946949),
    conf3=(0.028496, -1.808403),
)

VR_SECOND_SEG_BRAKE_TAILWIND_FACTORS = PerConfiguration(
    conf1=(0.014683, -0.347428),
    conf2=(0.019024, -0.725293),
    conf3=(-0.002393, 0.994507),
)

V1_SECOND_SEG_BRAKE_BASE_TABLE1 = PerConfiguration(
    conf1=(0.580888, 111.076),
    conf2=(0.663598, 102.54),
    conf3=(0.112254, 147.272),
)

V1_SECOND_SEG_BRAKE_BASE_TABLE2 = PerConfiguration(
    conf1=(0.460256, 104.849),
    conf2=(0.583566, 84.342),
    conf3=(0.527615, 95.085),
)

V1_SECOND_SEG_BRAKE_RUNWAY_TABLE1 = PerConfiguration(
    conf1=(3180, -0.000218, -0.003633),
    conf2=(3180, -0.000473, 0.015987),
    conf3=(3180, 0.000017, -0.022792),
)

V1_SECOND_SEG_BRAKE_RUNWAY_TABLE2 = PerConfiguration(
    conf1=(3180, 0.005044, -0.418865),
    conf2=(3180, 0.00052, -0.024703),
    conf3=(3180, 0.000688, -0.048497),
)

V1_SECOND_SEG_BRAKE_ALT_TABLE1 = PerConfiguration(
    conf1=(-0.000084, 0.00393, 0.000231, 0.123077),
    conf2=(-0.0000086, -0.000333, 0.000172, 0.347893),
    conf3=(0.000159, -0.012122, 0.000382, -0.452242),
)

V1_SECOND_SEG_BRAKE_ALT_TABLE2 = PerConfiguration(
    conf1=(0.000957, -0.077197, 0.000231, 0.123077),
    conf2=(0.000354, -0.025738, 0.000172, 0.347893),
    conf3=(0.000927, -0.072365, 0.000382, -0.452242),
)

V1_SECOND_SEG_BRAKE_SLOPE_FACTORS = PerConfiguration(
    conf1=(0.00003, -0.001069),
    conf2=(0.00003, -0.001069),
    conf3=(0.0000431, -0.003239),
)

V1_SECOND_SEG_BRAKE_HEADWIND_FACTORS = PerConfiguration(
    conf1=(0.019515, -1.23885),
    conf2=(0.019515, -1.23886),
    conf3=(0.065846, -4.365037),
)

V1_SECOND_SEG_BRAKE_TAILWIND_FACTORS = PerConfiguration(
    conf1=(0.032069, -1.44),
    conf2=(0.030147, -1.4286),
    conf3=(-0.001744, 1.0938),
)
