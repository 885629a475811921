"""Weight-limit pipeline coefficients per limiting factor.

Base factors are (per-metre, constant) in tonnes, slope factors tonnes per
metre per percent, pressure altitude factors (quadratic, linear) in tonnes
per foot. Temperature factors are consumed three segments at a time
(ISA..Tref, Tref..Tmax, above Tmax); wind factors likewise.
"""

from takeoffperf.interpolation import LookupTable
from takeoffperf.performance.types import PerConfiguration

_RUNWAY_PERF_LIMIT_CONF1 = LookupTable([
    (1000, 349_975),
    (1219, 384_324),
    (1604, 445_246),
    (1959, 490_613),
    (2134, 512_000),
    (2239, 522_370),
    (2459, 542_461),
    (2559, 550_886),
    (2709, 558_663),
    (2918, 562_876),
    (3000, 576_810),
    (3180, 587_828),
    (3800, 659_119),
    (5000, 699_949),
])

_RUNWAY_PERF_LIMIT_CONF2 = LookupTable([
    (1000, 353_215),
    (1219, 392_101),
    (1604, 460_152),
    (1959, 508_111),
    (2134, 526_906),
    (2239, 537_276),
    (2459, 554_127),
    (2709, 565_792),
    (2879, 570_329),
    (2987, 571_107),
    (3600, 619_585),
    (3800, 629_954),
    (3900, 634_491),
    (5000, 686_987),
])

_RUNWAY_PERF_LIMIT_CONF3 = LookupTable([
    (1000, 344_142),
    (1219, 390_157),
    (1604, 470_522),
    (1959, 517_833),
    (2134, 539_220),
    (2239, 541_165),
    (2459, 551_534),
    (2709, 569_033),
    (2839, 575_514),
    (3180, 594_309),
    (3800, 632_547),
    (5000, 680_506),
])

RUNWAY_PERF_LIMIT = PerConfiguration(
    conf1=_RUNWAY_PERF_LIMIT_CONF1,
    conf2=_RUNWAY_PERF_LIMIT_CONF2,
    conf3=_RUNWAY_PERF_LIMIT_CONF3,
)

RUNWAY_SLOPE_FACTOR = PerConfiguration(
    conf1=0.00084,
    conf2=0.00096,
    conf3=0.0011,
)

RUNWAY_PRESSURE_ALT_FACTOR = PerConfiguration(
    conf1=(3.43e-8, 0.001192),
    conf2=(1.15e-8, 0.001216),
    conf3=(-4.6e-9, 0.001245),
)

RUNWAY_TEMPERATURE_FACTOR = PerConfiguration(
    conf1=(0.00001, 0.095175, 0.000207, 0.040242, 0.00024, 0.066189),
    conf2=(-0.00001, 0.131948, 0.000155, 0.162938, 0.000225, 0.150363),
    conf3=(-0.0000438, 0.198845, 0.000188, 0.14547, 0.0002, 0.232529),
)

RUNWAY_HEAD_WIND_FACTOR = PerConfiguration(
    conf1=(0.000029, -0.233075, 0.00242, 0.003772),
    conf2=(0.000051, -0.277863, 0.0018, 0.003366),
    conf3=(0.000115, -0.3951, 0.002357, 0.002125),
)

RUNWAY_TAIL_WIND_FACTOR = PerConfiguration(
    conf1=(0.000065, -0.684701, 0.00498, 0.0808),
    conf2=(0.000198, -1.017, 0.00711, 0.009),
    conf3=(0.000271, -1.11506, 0.0078, 0.00875),
)

SECOND_SEGMENT_BASE_FACTOR = PerConfiguration(
    conf1=(0.00391, 75.366),
    conf2=(0.005465, 72.227),
    conf3=(0.00495, 72.256),
)

SECOND_SEGMENT_SLOPE_FACTOR = PerConfiguration(
    conf1=0.000419,
    conf2=0.000641,
    conf3=0.000459,
)

SECOND_SEGMENT_PRESSURE_ALT_FACTOR = PerConfiguration(
    conf1=(-6.5e-8, 0.001769),
    conf2=(1.05e-7, 0.00055),
    conf3=(7.48e-8, 0.000506),
)

SECOND_SEGMENT_TEMPERATURE_FACTOR = PerConfiguration(
    conf1=(0.000025, 0.001, 0.000155, 0.211445, 0.000071, 0.556741),
    conf2=(0.0000121, 0.042153, 0.0001256, 0.325925, 0.000082, 0.546259),
    conf3=(-0.0000294, 0.13903, 0.0000693, 0.480536, 0.000133, 0.480536),
)

SECOND_SEGMENT_HEAD_WIND_FACTOR = PerConfiguration(
    conf1=(0.000019, -0.13052, 0.000813636, 0.000145238),
    conf2=(0.0000454, -0.20585, 0.000416667, 0.001778293),
    conf3=(0.000085, -0.30209, 0.001189394, 0.0038996),
)

SECOND_SEGMENT_TAIL_WIND_FACTOR = PerConfiguration(
    conf1=(0.000104, -0.705693, 0.009, 0.00648),
    conf2=(0.000154, -0.8052, 0.009, 0.002444),
    conf3=(0.000054, -0.462, 0.00875, 0.006606505),
)

BRAKE_ENERGY_BASE_FACTOR = PerConfiguration(
    conf1=(0.00503, 72.524),
    conf2=(0.00672, 68.28),
    conf3=(0.00128, 83.951),
)

BRAKE_ENERGY_SLOPE_FACTOR = PerConfiguration(
    conf1=0.000045,
    conf2=0.000068,
    conf3=0.000045,
)

BRAKE_ENERGY_PRESSURE_ALT_FACTOR = PerConfiguration(
    conf1=(5.5e-8, 0.000968),
    conf2=(1.17e-7, 0.000595),
    conf3=(4.65e-8, 0.000658),
)

BRAKE_ENERGY_TEMPERATURE_FACTOR = PerConfiguration(
    conf1=(0.06, 0.54),
    conf2=(0.058, 0.545),
    conf3=(0.04642, 0.6),
)

BRAKE_ENERGY_HEAD_WIND_FACTOR = PerConfiguration(
    conf1=(0.0000311, -0.1769, 0.001125, 0),
    conf2=(0.0000316, -0.1799, 0.001182, 0),
    conf3=(0.0000147, -0.0928, 0.001111, 0),
)

BRAKE_ENERGY_TAIL_WIND_FACTOR = PerConfiguration(
    conf1=(0.000117, -0.8024, 0.0117879, 0.006667),
    conf2=(0.000157, -0.849, 0.0066818, 0.006667),
    conf3=(0.00013, -0.6946, 0.0068333, 0.006667),
)

VMCG_BASE_FACTOR = PerConfiguration(
    conf1=(0.0644, -19.526),
    conf2=(0.082005, -39.27),
    conf3=(0.0704, -25.6868),
)

VMCG_SLOPE_FACTOR = PerConfiguration(
    conf1=0.00084,
    conf2=0.001054,
    conf3=0.001068,
)

VMCG_PRESSURE_ALT_FACTOR = PerConfiguration(
    conf1=(-8.35e-7, 0.00589),
    conf2=(-7.58e-7, 0.00703),
    conf3=(1.95e-7, 0.00266),
)

VMCG_TEMPERATURE_FACTOR = PerConfiguration(
    conf1=(-0.00133, 2.104, 0.000699, -0.128144, -0.000718, 1.8103),
    conf2=(-0.00097, 1.613, 0.000242, 0.462005, -0.000547, 1.603),
    conf3=(-0.000923, 1.6087, 0.00061, 0.002239, -0.000335, 1.2716),
)

VMCG_HEAD_WIND_FACTOR = PerConfiguration(
    conf1=(0.001198, -1.80539, 0.000097, -0.15121, -0.000255, 0.337391, 0.000066, -0.079718),
    conf2=(0.000697, -1.17473, 0.000031, -0.057504, -0.000184, 0.246185, 0.000012, 0.0216),
    conf3=(0.0023, -3.468, -0.000037, 0.033946, -0.000156, 0.213953, -0.000757, 1.094),
)

VMCG_TAIL_WIND_FACTOR = PerConfiguration(
    conf1=(0.00218, -5.489, -0.000106, 0.145473, 0.031431, -0.0356),
    conf2=(0.001892, -5.646, -0.000059, 0.079539, 0.009948, -0.010763),
    conf3=(0.000613, -3.165, -0.000022, 0.020622, 0.049286, -0.0396),
)
