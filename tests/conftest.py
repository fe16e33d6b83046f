# -*- coding: utf-8 -*-
import pandas as pd
import pytest

from pandas_ta_cycle.utils import sample_ohlcv

# Reference outputs (TA-Lib) for the price series below; only the values
# after each indicator's warm-up are listed.
MIXED_PRICES = [
    82.4, 15.7, 63.2, 91.5, 27.8, 54.6, 39.1, 75.3, 44.2, 10.8, 67.5, 16.2,
    23.9, 87.1, 19.6, 10.1, 12.8, 11.4, 75.9, 13.7, 14.2, 13.5, 15.9, 14.8,
    43.3, 32.6, 16.2, 13.4, 17.5, 76.1, 65.8, 12.6, 11.9, 13.3, 13.7, 13.1,
    13.8, 15.4, 14.2, 10.6, 17.3, 43.1, 18.9, 17.7, 19.2,
]

RECOVERY_PRICES = [1.5, 2.7, 3.6, 4.8, 5.2, 6.4, 7.9, 8.3, 9.1, 9.7, 10.2, 11.6, 12.8, 13.9, 14.5]

TRENDING_PRICES = [
    100.00, 100.80, 101.60, 102.30, 103.10, 103.90, 104.70, 105.40, 106.20, 107.00,
    107.80, 108.50, 109.30, 110.10, 110.90, 111.60, 112.40, 113.20, 114.00, 114.70,
    114.20, 113.80, 113.50, 113.10, 112.80, 112.40, 112.10, 111.70, 111.40, 111.00,
    111.50, 111.90, 112.20, 112.60, 112.90, 113.30, 113.60, 114.00, 114.30, 114.70,
    115.50, 116.30, 117.10, 117.90, 118.70, 119.50, 120.30, 121.10, 121.90, 122.70,
    123.50, 124.30, 125.10, 125.90, 126.70, 127.50, 128.30, 129.10, 129.90, 130.70,
    130.20, 129.40, 128.60, 129.20, 129.80, 129.10, 128.40, 128.90, 129.40, 128.70,
    129.30, 129.90, 130.50, 130.00, 129.50, 130.10, 130.70, 131.30, 130.80, 130.30,
    130.90, 131.50, 132.10, 132.70, 133.30, 133.90, 134.50, 135.10, 135.70, 136.30,
    136.90, 137.50, 138.10, 138.70, 139.30, 139.90, 140.50, 141.10, 141.70, 142.30,
]

HT_DCPERIOD_TAIL = [
    11.01413133149039, 11.078560509576791, 11.491637310642503,
    11.862209566274696, 11.886530793859023, 11.92531421047681,
    12.347432957469852, 12.710058564748794, 12.74895559060974,
    12.621166815012625, 12.497115922161267, 12.462250807582187,
    12.515784344417638
]

HT_INPHASE_TAIL = [
    -0.9024212540316113, -0.9111713414354039, -0.8802499339301291,
    -0.4960778452207575, 0.23014326182764316, 0.7640685272779155,
    1.2051976875847823, 1.4124276273020036, 1.480539860969718,
    1.5330935653579774, 1.55852273854552, 1.6247655051654633,
    1.7036460167088041, 2.094098119232095, 2.644904666583977,
    3.0896840035867155, 3.4687494553929463, 3.8178013810604963,
    4.16338938698645, 4.517710463224215, 4.802326770579395,
    5.03001981646354, 5.212174253170801, 5.357897802536707,
    5.474476642029276, 5.567739713623535, 5.642350170898792,
    5.702038536719044, 5.749789229375306, 5.787989783500208,
    5.818550226800178, 5.631928274509247, 5.231299384009103,
    3.408348179741738, 0.47463103906539017, -1.8927735052680879,
    -2.1991180583317744, -0.5502106646549256, -0.13848330139516707,
    -1.0242883165477394, -1.0595315422118696, 0.023940740147532596,
    0.14701303615574066, 0.5013334899759525, 1.4223099248946263,
    1.795787900374446, 1.4419082904871432, 0.3013132038672545,
    0.15202808996388498, 0.7723534897849268, 1.3613343824720547,
    1.2221869268469512, 0.2554423474034378, 0.142313857397412,
    0.8195692281122378, 1.5640245994760262, 2.218333722674086,
    2.500684199438992, 2.582701732190924, 2.64507068686511,
    2.7332198657270186, 2.828359375876229, 2.8509790059819076,
    2.790398643814507, 2.7303652648708865, 2.7338179992730107,
    2.8140730539507297, 2.9681988696757102
]

HT_QUADRATURE_TAIL = [
    -0.019215874858781092, 0.21526515411755665, 0.8173598134743345,
    1.8739996453845966, 2.237272686834156, 1.9357657403984254,
    1.43590432781059, 0.737356067860151, 0.396154965488413,
    0.24176567936444127, 0.305998254710822, 0.5017104820991275,
    1.0799523015478043, 1.9093333739681657, 2.190959179919986,
    2.1462954099062257, 2.130978783208837, 2.109451105048814,
    2.144652014389174, 2.018627671848984, 1.7167425044518398,
    1.4333245910735462, 1.166642597179318, 0.9458209465452857,
    0.7646611532696098, 0.616851736077154, 0.49675998947666156,
    0.39950629597537207, 0.23527357761538528, 0.0005297541692854394,
    -1.318796410652403, -3.5998368723728733, -8.614498130049618,
    -14.999810337819635, -15.031792335762978, -8.459778109918657,
    1.4428432526514114, 4.345819627075662, -0.37055744149532255,
    -1.1980818438162115, 2.609404589851861, 2.9518294254645614,
    1.8006797797994998, 3.0500565820431476, 2.3071475638650067,
    0.03384996843957971, -2.3315904207860485, -2.0458825833984573,
    0.5794794455217158, 1.5340231818529844, 0.6334047500583837,
    -1.4727944504136345, -1.3896127591400955, 1.028331535122911,
    2.3674119442891164, 2.589765322190243, 1.9893400150495408,
    1.0376474637631037, 0.5580619656354756, 0.4054242230297649,
    0.35896835435978436, 0.21593829485940866, -0.0351717948377084,
    -0.1674571003319354, -0.05483941614261505, 0.24951575611036117,
    0.6575350111370634, 1.0769457349889688
]

HT_SINE_TAIL = [
    -0.8054234481836359, -0.8788789683642892, -0.8714401808914891,
    -0.8717537870449541, -0.8534331080589961, -0.8321422845849583,
    -0.8100343297699533, -0.8418742309510645, -0.8840379331205565,
    -0.8832298879259829, -0.49040608655707907, -0.5605572455865833,
    -0.6462734679721165, -0.7299533902586671, -0.7972413413846803,
    -0.8051224126410216, -0.6664587453711182, 0.1881615294707592,
    0.6121029289755424, 0.5546799237315236, 0.3405424738781243,
    0.26031666726838654, 0.24116116374861532, 0.2109372193332064,
    0.2463558316984052, 0.2757538813329909, 0.29888474587743574,
    0.33533529051313044, 0.3388740852641238, 0.3357796731387057,
    0.33186863266624317, 0.34706636856856743, 0.3653398499142346,
    0.38837719616065614, 0.40979336123832383, 0.42452098445044756,
    0.4295473216017694
]

HT_LEADSINE_TAIL = [
    -0.9886224393863081, -0.9587829045448316, -0.9630384069009633,
    -0.962865891867503, -0.972014081473768, -0.9805481346935279,
    -0.987415778514062, -0.9769019608159939, -0.9556216473621022,
    -0.9561286791261617, -0.9630088182406326, -0.9819400403800399,
    -0.9965817037153677, -0.9994603035994151, -0.9905873349177976,
    -0.988698683917335, -0.9984352389990282, -0.5614262140126303,
    -0.1263424254634246, -0.19614002624889545, -0.42404250360679246,
    -0.49865638844363386, -0.5157098878089158, -0.5420414653482957,
    -0.5111134813316321, -0.48470359219110487, -0.4634409455800027,
    -0.4290466274019181, -0.4256483363984332, -0.4286204707872477,
    -0.43236537663955943, -0.4177404443858739, -0.39989318071496716,
    -0.37697509644811084, -0.35523985513970435, -0.340045610659053,
    -0.33481295982348164
]

HT_DCPHASE_TAIL = [
    233.65116984500827, 241.50742833239255, 240.62643154461477,
    240.66308488035088, 238.58706003149473, 236.31943546084844,
    234.0992856633515, 237.33856620350363, 242.13336055561314,
    242.03447167881455, 209.3672759594716, 214.0943437517444,
    220.2612230033994, 226.88248673774808, 232.86747150026986,
    233.6220790333538, 221.79433390525946, 169.15448743546426,
    142.25828576284323, 146.31132844599972, 160.0900720524462,
    164.91114711614483, 166.04491668714286, 167.82271866276153,
    165.7380266726272, 163.99305440302507, 162.6093693062374,
    160.4070719287082, 160.1917078928213, 160.3800435678551,
    160.61776680809302, 159.69201427273052, 158.57150085957235,
    157.14643857004398, 155.80814526008595, 154.87965294129876,
    154.56116453278264
]

MAMA_TAIL = [
    30.3185218092, 29.4675957187, 21.5837978593, 21.1596079664,
    20.7916275681, 18.0958137840, 17.9010230948, 17.5359719401,
    17.5241733431, 18.8029646759, 18.8514823380, 18.7939082211,
    18.9969541105, 10.2484770553, 9.8710532025, 9.5575005424, 7.1787502712,
    7.0798127576, 7.0458221197, 7.0885310138, 7.1491044631, 7.2466492399,
    7.3693167779, 8.7846583890, 8.9254254695, 9.1191541960, 9.3581964862,
    11.9290982431
]

FAMA_TAIL = [
    29.0351771385, 29.0459876030, 27.1804401671, 27.0299193620,
    26.8739620672, 24.6794249964, 24.5099649489, 24.3356151236,
    24.1653290791, 24.0312699690, 22.7363230613, 22.6377626903,
    21.7275605453, 18.8577896728, 18.6331212611, 18.4062307431,
    15.5993606251, 15.3863719284, 15.1778581832, 14.9756250040,
    14.7799619905, 14.5916291717, 14.4110713618, 13.0044681186,
    12.9024920524, 12.8079086060, 12.7216658030, 12.5235239130
]

HT_TL_TAIL = [
    19.1611428571, 21.3729747899, 23.8644705882, 25.0798916409,
    27.0454179567, 29.1838390093, 31.1192397661, 33.6827777778,
    35.3434210526, 36.5905555556, 38.9438888889, 41.2929738562,
    42.7895424837, 43.5448039216, 42.0170588235, 41.6332352941,
    39.5265441176, 37.7658823529, 35.7387500000, 33.7318750000,
    30.7596250000, 29.6255416667, 29.2431250000, 27.9707083333,
    27.2564166667, 24.7721250000, 24.9990714286, 27.0412857143,
    28.7195714286, 28.1600000000, 27.1728571429, 26.2442857143,
    25.7592857143, 25.6807142857, 25.6435714286, 25.3190000000,
    24.2121428571, 23.0021428571, 22.9013333333, 23.3445714286,
    22.1780952381, 19.9381904762, 17.8700000000, 16.2864285714,
    15.3492857143, 14.6967582418, 14.0506043956, 13.3853846154,
    12.7876923077, 12.3669230769, 11.8953846154, 10.5946153846,
    9.4123076923, 8.4469230769, 7.7184615385, 7.7915384615, 8.2953846154
]


@pytest.fixture
def mixed() -> pd.Series:
    """45 bars, enough for the 32 bar lookback kinds."""
    return pd.Series(MIXED_PRICES, name="close")


@pytest.fixture
def mama_close() -> pd.Series:
    return pd.Series(MIXED_PRICES + RECOVERY_PRICES, name="close")


@pytest.fixture
def trendline_close() -> pd.Series:
    return pd.Series((MIXED_PRICES + RECOVERY_PRICES) * 2, name="close")


@pytest.fixture
def trending() -> pd.Series:
    return pd.Series(TRENDING_PRICES, name="close")


@pytest.fixture
def ohlcv() -> pd.DataFrame:
    return sample_ohlcv(600, 11)


@pytest.fixture
def golden() -> dict:
    return {
        "ht_dcperiod": HT_DCPERIOD_TAIL,
        "ht_inphase": HT_INPHASE_TAIL,
        "ht_quadrature": HT_QUADRATURE_TAIL,
        "ht_sine": HT_SINE_TAIL,
        "ht_leadsine": HT_LEADSINE_TAIL,
        "ht_dcphase": HT_DCPHASE_TAIL,
        "mama": MAMA_TAIL,
        "fama": FAMA_TAIL,
        "ht_tl": HT_TL_TAIL,
    }


@pytest.fixture
def ohlcv_factory():
    return sample_ohlcv
