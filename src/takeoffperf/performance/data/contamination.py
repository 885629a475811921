"""Contaminated runway coefficients.

For every contamination state: the weight correction keyed by adjusted
TORA (m), the lowest corrected weight the data covers, the MTOW keyed by
corrected weight, and (V1, VR, V2) keyed by takeoff weight.
"""

from takeoffperf.interpolation import LookupTable, VectorLookupTable
from takeoffperf.performance.types import PerConfiguration

WEIGHT_CORRECTION_CONTAMINATED_6MM_WATER = PerConfiguration(
    conf1=LookupTable([
        (2_500, 97_215),
        (3_000, 93_327),
        (3_500, 68_051),
        (4_000, 6_800),
    ]),
    conf2=LookupTable([
        (2_000, 112_770),
        (2_500, 112_770),
        (3_000, 100_456),
    ]),
    conf3=LookupTable([
        (1_750, 121_195),
        (2_000, 121_195),
        (2_500, 112_770),
    ]),
)

MIN_CORRECTED_TOW_CONTAMINATED_6MM_WATER = PerConfiguration(
    conf1=374_603,
    conf2=368_122,
    conf3=370_714,
)

MTOW_CONTAMINATED_6MM_WATER = PerConfiguration(
    conf1=LookupTable([
        (374_603, 308_496),
        (382_380, 343_494),
        (393_397, 393_397),
        (512_000, 512_000),
    ]),
    conf2=LookupTable([
        (368_122, 308_496),
        (382_380, 382_380),
        (512_000, 512_000),
    ]),
    conf3=LookupTable([
        (370_714, 308_496),
        (382_380, 362_937),
        (387_565, 387_565),
        (512_000, 512_000),
    ]),
)

V_SPEEDS_CONTAMINATED_6MM_WATER = PerConfiguration(
    conf1=VectorLookupTable([
        (308_496, (122, 125, 127)),
        (317_570, (122, 127, 129)),
        (349_975, (122, 133, 135)),
        (382_380, (122, 139, 141)),
        (393_397, (122, 141, 143)),
        (414_785, (126, 145, 147)),
        (447_190, (132, 151, 153)),
        (479_595, (137, 156, 158)),
        (512_000, (142, 161, 163)),
    ]),
    conf2=VectorLookupTable([
        (308_496, (122, 126, 127)),
        (317_570, (122, 128, 129)),
        (349_975, (122, 134, 135)),
        (382_380, (122, 141, 142)),
        (414_785, (127, 146, 147)),
        (447_190, (133, 152, 153)),
        (479_595, (139, 158, 159)),
        (512_000, (144, 163, 164)),
    ]),
    conf3=VectorLookupTable([
        (308_496, (122, 126, 126)),
        (317_570, (122, 128, 128)),
        (349_975, (122, 134, 134)),
        (382_380, (122, 140, 140)),
        (387_565, (122, 141, 141)),
        (414_785, (127, 146, 146)),
        (447_190, (133, 152, 152)),
        (479_595, (139, 158, 158)),
        (512_000, (144, 163, 163)),
    ]),
)

WEIGHT_CORRECTION_CONTAMINATED_13MM_WATER = PerConfiguration(
    conf1=LookupTable([
        (2_500, 121_195),
        (3_000, 113_418),
        (3_500, 88_142),
        (4_000, 9_700),
    ]),
    conf2=LookupTable([
        (2_000, 136_101),
        (2_500, 134_805),
        (3_000, 119_899),
    ]),
    conf3=LookupTable([
        (1_750, 141_934),
        (2_000, 141_934),
        (2_500, 132_861),
    ]),
)

MIN_CORRECTED_TOW_CONTAMINATED_13MM_WATER = PerConfiguration(
    conf1=345_438,
    conf2=345_438,
    conf3=366_177,
)

MTOW_CONTAMINATED_13MM_WATER = PerConfiguration(
    conf1=LookupTable([
        (345_438, 308_496),
        (349_975, 330_532),
        (355_159, 355_159),
        (512_000, 512_000),
    ]),
    conf2=LookupTable([
        (345_438, 308_496),
        (349_975, 330_532),
        (354_511, 354_511),
        (512_000, 512_000),
    ]),
    conf3=LookupTable([
        (366_177, 308_496),
        (382_380, 382_380),
        (512_000, 512_000),
    ]),
)

V_SPEEDS_CONTAMINATED_13MM_WATER = PerConfiguration(
    conf1=VectorLookupTable([
        (308_496, (122, 125, 127)),
        (317_570, (122, 127, 129)),
        (349_975, (122, 133, 135)),
        (355_159, (122, 134, 136)),
        (382_380, (127, 139, 141)),
        (414_785, (133, 145, 147)),
        (447_190, (132, 151, 153)),
        (479_595, (144, 156, 158)),
        (512_000, (149, 161, 163)),
    ]),
    conf2=VectorLookupTable([
        (308_496, (122, 126, 127)),
        (317_570, (122, 128, 129)),
        (349_975, (122, 134, 135)),
        (354_511, (122, 135, 136)),
        (382_380, (128, 141, 142)),
        (414_785, (133, 146, 147)),
        (447_190, (139, 152, 153)),
        (479_595, (145, 158, 159)),
        (512_000, (150, 163, 164)),
    ]),
    conf3=VectorLookupTable([
        (308_496, (122, 126, 126)),
        (317_570, (122, 128, 128)),
        (349_975, (122, 134, 134)),
        (382_380, (122, 140, 140)),
        (414_785, (128, 146, 146)),
        (447_190, (134, 152, 152)),
        (479_595, (140, 158, 158)),
        (512_000, (145, 163, 163)),
    ]),
)

WEIGHT_CORRECTION_CONTAMINATED_6MM_SLUSH = PerConfiguration(
    conf1=LookupTable([
        (2_500, 99_808),
        (3_000, 92_030),
        (3_500, 67_403),
        (4_000, 6_600),
    ]),
    conf2=LookupTable([
        (2_000, 116_010),
        (2_500, 115_362),
        (3_000, 100_456),
    ]),
    conf3=LookupTable([
        (1_750, 124_435),
        (2_000, 123_139),
        (2_500, 111_473),
    ]),
)

MIN_CORRECTED_TOW_CONTAMINATED_6MM_SLUSH = PerConfiguration(
    conf1=370_714,
    conf2=364_233,
    conf3=345_438,
)

MTOW_CONTAMINATED_6MM_SLUSH = PerConfiguration(
    conf1=LookupTable([
        (370_714, 308_496),
        (382_380, 362_937),
        (387_565, 387_565),
        (512_000, 512_000),
    ]),
    conf2=LookupTable([
        (364_233, 308_496),
        (382_380, 362_937),
        (512_000, 512_000),
    ]),
    conf3=LookupTable([
        (345_438, 308_496),
        (349_975, 330_532),
        (355_159, 355_159),
        (512_000, 512_000),
    ]),
)

V_SPEEDS_CONTAMINATED_6MM_SLUSH = PerConfiguration(
    conf1=VectorLookupTable([
        (308_496, (122, 125, 127)),
        (317_570, (122, 127, 129)),
        (349_975, (122, 133, 135)),
        (382_380, (127, 139, 141)),
        (387_565, (127, 140, 142)),
        (414_785, (127, 145, 147)),
        (447_190, (133, 151, 153)),
        (479_595, (138, 156, 158)),
        (512_000, (143, 161, 163)),
    ]),
    conf2=VectorLookupTable([
        (308_496, (122, 126, 127)),
        (317_570, (122, 128, 129)),
        (349_975, (122, 134, 135)),
        (377_843, (122, 140, 141)),
        (382_380, (123, 141, 142)),
        (414_785, (128, 146, 147)),
        (447_190, (134, 152, 153)),
        (479_595, (140, 158, 159)),
        (512_000, (145, 163, 164)),
    ]),
    conf3=VectorLookupTable([
        (308_496, (122, 126, 126)),
        (317_570, (122, 128, 128)),
        (349_975, (122, 134, 134)),
        (355_159, (122, 135, 135)),
        (382_380, (127, 140, 140)),
        (414_785, (133, 146, 146)),
        (447_190, (139, 152, 152)),
        (479_595, (145, 158, 158)),
        (512_000, (150, 163, 163)),
    ]),
)

WEIGHT_CORRECTION_CONTAMINATED_13MM_SLUSH = PerConfiguration(
    conf1=LookupTable([
        (2_500, 125_732),
        (3_000, 115_362),
        (3_500, 88_790),
        (4_000, 10_000),
    ]),
    conf2=LookupTable([
        (2_000, 142_582),
        (2_500, 139_990),
        (3_000, 121_843),
    ]),
    conf3=LookupTable([
        (1_750, 117_954),
        (2_000, 146_471),
        (2_500, 135_453),
    ]),
)

MIN_CORRECTED_TOW_CONTAMINATED_13MM_SLUSH = PerConfiguration(
    conf1=340_901,
    conf2=337_013,
    conf3=337_013,
)

MTOW_CONTAMINATED_13MM_SLUSH = PerConfiguration(
    conf1=LookupTable([
        (340_901, 308_496),
        (349_975, 349_975),
        (512_000, 512_000),
    ]),
    conf2=LookupTable([
        (337_013, 308_496),
        (344_790, 344_790),
        (512_000, 512_000),
    ]),
    conf3=LookupTable([
        (337_013, 308_496),
        (344_790, 344_790),
        (512_000, 512_000),
    ]),
)

V_SPEEDS_CONTAMINATED_13MM_SLUSH = PerConfiguration(
    conf1=VectorLookupTable([
        (308_496, (122, 126, 127)),
        (317_570, (122, 128, 129)),
        (349_975, (122, 134, 135)),
        (382_380, (128, 140, 141)),
        (414_785, (134, 146, 147)),
        (447_190, (140, 152, 153)),
        (479_595, (145, 157, 158)),
        (512_000, (150, 162, 163)),
    ]),
    conf2=VectorLookupTable([
        (308_496, (122, 126, 127)),
        (317_570, (122, 128, 129)),
        (344_790, (122, 133, 134)),
        (349_975, (123, 134, 135)),
        (382_380, (130, 141, 142)),
        (414_785, (135, 146, 147)),
        (447_190, (141, 152, 153)),
        (479_595, (147, 158, 159)),
        (512_000, (152, 163, 164)),
    ]),
    conf3=VectorLookupTable([
        (308_496, (122, 126, 126)),
        (317_570, (122, 128, 128)),
        (344_790, (122, 133, 133)),
        (349_975, (123, 134, 134)),
        (382_380, (129, 140, 140)),
        (414_785, (135, 146, 146)),
        (447_190, (141, 152, 152)),
        (479_595, (147, 158, 158)),
        (512_000, (152, 163, 163)),
    ]),
)

WEIGHT_CORRECTION_CONTAMINATED_COMPACTED_SNOW = PerConfiguration(
    conf1=LookupTable([
        (2_500, 66_106),
        (3_000, 9_000),
        (3_500, 4_700),
        (4_000, 3_000),
    ]),
    conf2=LookupTable([
        (2_000, 86_197),
        (2_500, 82_309),
        (3_000, 66_754),
    ]),
    conf3=LookupTable([
        (1_750, 97_863),
        (2_000, 95_919),
        (2_500, 82_309),
    ]),
)

MIN_CORRECTED_TOW_CONTAMINATED_COMPACTED_SNOW = PerConfiguration(
    conf1=370_714,
    conf2=364_233,
    conf3=366_177,
)

MTOW_CONTAMINATED_COMPACTED_SNOW = PerConfiguration(
    conf1=LookupTable([
        (370_714, 308_496),
        (382_380, 362_937),
        (387_565, 387_565),
        (512_000, 512_000),
    ]),
    conf2=LookupTable([
        (364_233, 308_496),
        (377_843, 377_843),
        (512_000, 512_000),
    ]),
    conf3=LookupTable([
        (366_177, 308_496),
        (382_380, 382_380),
        (512_000, 512_000),
    ]),
)

V_SPEEDS_CONTAMINATED_COMPACTED_SNOW = PerConfiguration(
    conf1=VectorLookupTable([
        (308_496, (122, 126, 127)),
        (317_570, (122, 128, 129)),
        (349_975, (122, 134, 135)),
        (382_380, (122, 140, 141)),
        (387_565, (122, 141, 142)),
        (414_785, (127, 146, 147)),
        (447_190, (133, 152, 153)),
        (479_595, (138, 157, 158)),
        (512_000, (143, 162, 163)),
    ]),
    conf2=VectorLookupTable([
        (308_496, (122, 126, 127)),
        (317_570, (122, 128, 129)),
        (349_975, (122, 134, 135)),
        (377_843, (122, 140, 141)),
        (382_380, (123, 141, 142)),
        (414_785, (128, 146, 147)),
        (447_190, (134, 152, 153)),
        (479_595, (140, 158, 159)),
        (512_000, (145, 163, 164)),
    ]),
    conf3=VectorLookupTable([
        (308_496, (122, 126, 126)),
        (317_570, (122, 128, 128)),
        (349_975, (122, 134, 134)),
        (382_380, (122, 140, 140)),
        (414_785, (128, 146, 146)),
        (447_190, (134, 152, 152)),
        (479_595, (140, 158, 158)),
        (512_000, (145, 163, 163)),
    ]),
)

WEIGHT_CORRECTION_CONTAMINATED_5MM_WET_SNOW = PerConfiguration(
    conf1=LookupTable([
        (2_500, 73_884),
        (3_000, 68_051),
        (3_500, 6_000),
        (4_000, 3_000),
    ]),
    conf2=LookupTable([
        (2_000, 97_215),
        (2_500, 92_030),
        (3_000, 77_124),
    ]),
    conf3=LookupTable([
        (1_750, 113_418),
        (2_000, 110_825),
        (2_500, 92_678),
    ]),
)

MIN_CORRECTED_TOW_CONTAMINATED_5MM_WET_SNOW = PerConfiguration(
    conf1=366_177,
    conf2=372_010,
    conf3=374_603,
)

MTOW_CONTAMINATED_5MM_WET_SNOW = PerConfiguration(
    conf1=LookupTable([
        (366_177, 308_496),
        (382_380, 382_380),
        (512_000, 512_000),
    ]),
    conf2=LookupTable([
        (372_010, 308_496),
        (382_380, 362_937),
        (388_861, 388_861),
        (512_000, 512_000),
    ]),
    conf3=LookupTable([
        (374_603, 308_496),
        (382_380, 343_494),
        (393_397, 393_397),
        (512_000, 512_000),
    ]),
)

V_SPEEDS_CONTAMINATED_5MM_WET_SNOW = PerConfiguration(
    conf1=VectorLookupTable([
        (308_496, (122, 126, 127)),
        (317_570, (122, 128, 129)),
        (349_975, (122, 134, 135)),
        (382_380, (122, 140, 141)),
        (414_785, (128, 146, 147)),
        (447_190, (134, 152, 153)),
        (479_595, (139, 157, 158)),
        (512_000, (144, 162, 163)),
    ]),
    conf2=VectorLookupTable([
        (308_496, (122, 126, 127)),
        (317_570, (122, 128, 129)),
        (349_975, (122, 134, 135)),
        (382_380, (122, 141, 142)),
        (388_861, (122, 142, 143)),
        (414_785, (126, 146, 147)),
        (447_190, (132, 152, 153)),
        (479_595, (138, 158, 159)),
        (512_000, (143, 163, 164)),
    ]),
    conf3=VectorLookupTable([
        (308_496, (122, 126, 126)),
        (317_570, (122, 128, 128)),
        (349_975, (122, 134, 134)),
        (382_380, (122, 140, 140)),
        (393_397, (122, 142, 142)),
        (414_785, (126, 146, 146)),
        (447_190, (132, 152, 152)),
        (479_595, (138, 158, 158)),
        (512_000, (143, 163, 163)),
    ]),
)

WEIGHT_CORRECTION_CONTAMINATED_15MM_WET_SNOW = PerConfiguration(
    conf1=LookupTable([
        (2_500, 105_641),
        (3_000, 96_567),
        (3_500, 70_643),
        (4_000, 7_100),
    ]),
    conf2=LookupTable([
        (2_000, 123_139),
        (2_500, 121_195),
        (3_000, 104_344),
    ]),
    conf3=LookupTable([
        (1_750, 130_916),
        (2_000, 129_620),
        (2_500, 117_306),
    ]),
)

MIN_CORRECTED_TOW_CONTAMINATED_15MM_WET_SNOW = PerConfiguration(
    conf1=349_327,
    conf2=345_438,
    conf3=345_438,
)

MTOW_CONTAMINATED_15MM_WET_SNOW = PerConfiguration(
    conf1=LookupTable([
        (349_327, 308_496),
        (349_975, 311_089),
        (360_992, 360_992),
        (512_000, 512_000),
    ]),
    conf2=LookupTable([
        (345_438, 308_496),
        (349_975, 330_532),
        (354_511, 354_511),
        (512_000, 512_000),
    ]),
    conf3=LookupTable([
        (345_438, 308_496),
        (349_975, 330_532),
        (355_159, 355_159),
        (512_000, 512_000),
    ]),
)

V_SPEEDS_CONTAMINATED_15MM_WET_SNOW = PerConfiguration(
    conf1=VectorLookupTable([
        (308_496, (122, 126, 127)),
        (317_570, (122, 128, 129)),
        (349_975, (122, 134, 135)),
        (360_992, (122, 136, 137)),
        (382_380, (126, 140, 141)),
        (414_785, (132, 146, 147)),
        (447_190, (138, 152, 153)),
        (479_595, (143, 157, 158)),
        (512_000, (148, 162, 163)),
    ]),
    conf2=VectorLookupTable([
        (308_496, (122, 126, 127)),
        (317_570, (122, 128, 129)),
        (349_975, (122, 134, 135)),
        (354_511, (122, 135, 136)),
        (382_380, (128, 141, 142)),
        (414_785, (133, 146, 147)),
        (447_190, (139, 152, 153)),
        (479_595, (145, 158, 159)),
        (512_000, (150, 163, 164)),
    ]),
    conf3=VectorLookupTable([
        (308_496, (122, 126, 126)),
        (317_570, (122, 128, 128)),
        (349_975, (122, 134, 134)),
        (355_159, (122, 135, 135)),
        (382_380, (127, 140, 140)),
        (414_785, (133, 146, 146)),
        (447_190, (139, 152, 152)),
        (479_595, (145, 158, 158)),
        (512_000, (150, 163, 163)),
    ]),
)

WEIGHT_CORRECTION_CONTAMINATED_30MM_WET_SNOW = PerConfiguration(
    conf1=LookupTable([
        (2_500, 149_063),
        (3_000, 136_749),
        (3_500, 124_435),
        (4_000, 124_435),
    ]),
    conf2=LookupTable([
        (2_000, 160_081),
        (2_500, 158_137),
        (3_000, 145_175),
    ]),
    conf3=LookupTable([
        (1_750, 163_322),
        (2_000, 162_025),
        (2_500, 153_600),
    ]),
)

MIN_CORRECTED_TOW_CONTAMINATED_30MM_WET_SNOW = PerConfiguration(
    conf1=311_737,
    conf2=308_496,
    conf3=308_496,
)

MTOW_CONTAMINATED_30MM_WET_SNOW = PerConfiguration(
    conf1=LookupTable([
        (311_737, 308_496),
        (313_033, 313_033),
        (512_000, 512_000),
    ]),
    conf2=LookupTable([
        (308_496, 308_496),
        (512_000, 512_000),
    ]),
    conf3=LookupTable([
        (308_496, 308_496),
        (512_000, 512_000),
    ]),
)

V_SPEEDS_CONTAMINATED_30MM_WET_SNOW = PerConfiguration(
    conf1=VectorLookupTable([
        (308_496, (122, 126, 127)),
        (313_033, (122, 127, 128)),
        (317_570, (123, 128, 129)),
        (349_975, (130, 134, 135)),
        (382_380, (137, 141, 142)),
        (414_785, (142, 146, 147)),
        (447_190, (148, 152, 153)),
        (479_595, (154, 158, 159)),
        (512_000, (159, 163, 164)),
    ]),
    conf2=VectorLookupTable([
        (308_496, (122, 126, 127)),
        (317_570, (124, 128, 129)),
        (349_975, (130, 134, 135)),
        (382_380, (137, 141, 142)),
        (414_785, (142, 146, 147)),
        (447_190, (148, 152, 153)),
        (479_595, (154, 158, 159)),
        (512_000, (159, 163, 164)),
    ]),
    conf3=VectorLookupTable([
        (308_496, (122, 126, 126)),
        (317_570, (124, 128, 128)),
        (349_975, (130, 134, 134)),
        (382_380, (136, 140, 140)),
        (414_785, (142, 146, 146)),
        (447_190, (148, 152, 152)),
        (479_595, (154, 158, 158)),
        (512_000, (159, 163, 163)),
    ]),
)

WEIGHT_CORRECTION_CONTAMINATED_10MM_DRY_SNOW = PerConfiguration(
    conf1=LookupTable([
        (2_500, 73_884),
        (3_000, 68_051),
        (3_500, 6_000),
        (4_000, 3_000),
    ]),
    conf2=LookupTable([
        (2_000, 97_215),
        (2_500, 92_030),
        (3_000, 76_476),
    ]),
    conf3=LookupTable([
        (1_750, 113_418),
        (2_000, 110_825),
        (2_500, 92_678),
    ]),
)

MIN_CORRECTED_TOW_CONTAMINATED_10MM_DRY_SNOW = PerConfiguration(
    conf1=366_177,
    conf2=372_010,
    conf3=374_603,
)

MTOW_CONTAMINATED_10MM_DRY_SNOW = PerConfiguration(
    conf1=LookupTable([
        (366_177, 308_496),
        (382_380, 382_380),
        (512_000, 512_000),
    ]),
    conf2=LookupTable([
        (372_010, 308_496),
        (382_380, 362_937),
        (388_861, 388_861),
        (512_000, 512_000),
    ]),
    conf3=LookupTable([
        (374_603, 308_496),
        (382_380, 343_494),
        (393_397, 393_397),
        (512_000, 512_000),
    ]),
)

V_SPEEDS_CONTAMINATED_10MM_DRY_SNOW = PerConfiguration(
    conf1=VectorLookupTable([
        (308_496, (122, 126, 127)),
        (317_570, (122, 128, 129)),
        (349_975, (122, 134, 135)),
        (382_380, (122, 140, 141)),
        (414_785, (128, 146, 147)),
        (447_190, (134, 152, 153)),
        (479_595, (139, 157, 158)),
        (512_000, (144, 162, 163)),
    ]),
    conf2=VectorLookupTable([
        (308_496, (122, 126, 127)),
        (317_570, (122, 128, 129)),
        (349_975, (122, 134, 135)),
        (382_380, (122, 141, 142)),
        (388_861, (122, 142, 143)),
        (414_785, (126, 146, 147)),
        (447_190, (132, 152, 153)),
        (479_595, (138, 158, 159)),
        (512_000, (143, 163, 164)),
    ]),
    conf3=VectorLookupTable([
        (308_496, (122, 126, 126)),
        (317_570, (122, 128, 128)),
        (349_975, (122, 134, 134)),
        (382_380, (122, 140, 140)),
        (393_397, (122, 142, 142)),
        (414_785, (126, 146, 146)),
        (447_190, (132, 152, 152)),
        (479_595, (138, 158, 158)),
        (512_000, (143, 163, 163)),
    ]),
)

WEIGHT_CORRECTION_CONTAMINATED_100MM_DRY_SNOW = PerConfiguration(
    conf1=LookupTable([
        (2_500, 125_084),
        (3_000, 127_028),
        (3_500, 113_418),
        (4_000, 102_400),
    ]),
    conf2=LookupTable([
        (2_000, 136_749),
        (2_500, 142_582),
        (3_000, 138_694),
    ]),
    conf3=LookupTable([
        (1_750, 143_230),
        (2_000, 144_527),
        (2_500, 141_286),
    ]),
)

MIN_CORRECTED_TOW_CONTAMINATED_100MM_DRY_SNOW = PerConfiguration(
    conf1=315_625,
    conf2=313_033,
    conf3=315_625,
)

MTOW_CONTAMINATED_100MM_DRY_SNOW = PerConfiguration(
    conf1=LookupTable([
        (315_625, 308_496),
        (317_570, 317_570),
        (512_000, 512_000),
    ]),
    conf2=LookupTable([
        (311_737, 308_496),
        (313_033, 313_033),
        (512_000, 512_000),
    ]),
    conf3=LookupTable([
        (315_625, 308_496),
        (317_570, 317_570),
        (512_000, 512_000),
    ]),
)

V_SPEEDS_CONTAMINATED_100MM_DRY_SNOW = PerConfiguration(
    conf1=VectorLookupTable([
        (308_496, (122, 126, 127)),
        (317_570, (122, 128, 129)),
        (349_975, (128, 134, 135)),
        (382_380, (134, 140, 141)),
        (414_785, (140, 146, 147)),
        (447_190, (146, 152, 153)),
        (479_595, (151, 157, 158)),
        (512_000, (156, 162, 163)),
    ]),
    conf2=VectorLookupTable([
        (308_496, (122, 126, 127)),
        (313_033, (122, 127, 128)),
        (317_570, (123, 128, 129)),
        (349_975, (129, 134, 135)),
        (382_380, (136, 141, 142)),
        (414_785, (141, 146, 147)),
        (447_190, (147, 152, 153)),
        (479_595, (153, 158, 159)),
        (512_000, (158, 163, 164)),
    ]),
    conf3=VectorLookupTable([
        (308_496, (122, 126, 126)),
        (317_570, (122, 128, 128)),
        (349_975, (128, 134, 134)),
        (382_380, (134, 140, 140)),
        (414_785, (140, 146, 146)),
        (447_190, (146, 152, 152)),
        (479_595, (152, 158, 158)),
        (512_000, (157, 163, 163)),
    ]),
)
