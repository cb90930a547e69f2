"""Logarithm of the Gamma Function.

ln Gamma(z) for z > 0 from a lookup table, rational approximations and an
asymptotic expansion:

    - integers 1 <= z <= 200: table of ln((z-1)!)
    - z > 12: Stirling series
    - z <= 12: rational approximations with coefficients from Cody and
      Hillstrom [1], evaluated the way Temme [2] does

Absolute relative error against the C library lgamma is about 9.4e-10.

References:
    [1] Cody, W., & Hillstrom, K. (1967). Chebyshev Approximations for the
        Natural Logarithm of the Gamma Function. Mathematics of Computation,
        21(98), 198-203.
    [2] Temme, N. (1994). A Set of Algorithms for the Incomplete Gamma
        Functions. Probability in the Engineering and Informational Sciences,
        8(2), 291-307.
"""

import math
import numpy as np

from pgmath.optim import optimized_jit
from ._constants import DBL_EPSILON, DBL_MIN, LS2PI, MAX_EXP

__all__ = [
    'lgamma',
    'LOGFACTORIAL',
]


# LOGFACTORIAL[n] = ln(n!) for n = 0..199, so lgamma(z) = LOGFACTORIAL[z - 1]
LOGFACTORIAL = np.array([
    0.000000000000000, 0.0000000000000000, 0.69314718055994529,
    1.791759469228055, 3.1780538303479458, 4.7874917427820458,
    6.5792512120101012, 8.5251613610654147, 10.604602902745251,
    12.801827480081469, 15.104412573075516, 17.502307845873887,
    19.987214495661885, 22.552163853123425, 25.19122118273868,
    27.89927138384089, 30.671860106080672, 33.505073450136891,
    36.395445208033053, 39.339884187199495, 42.335616460753485,
    45.380138898476908, 48.471181351835227, 51.606675567764377,
    54.784729398112319, 58.003605222980518, 61.261701761002001,
    64.557538627006338, 67.88974313718154, 71.257038967168015,
    74.658236348830158, 78.092223553315307, 81.557959456115043,
    85.054467017581516, 88.580827542197682, 92.136175603687093,
    95.719694542143202, 99.330612454787428, 102.96819861451381,
    106.63176026064346, 110.32063971475739, 114.03421178146171,
    117.77188139974507, 121.53308151543864, 125.3172711493569,
    129.12393363912722, 132.95257503561632, 136.80272263732635,
    140.67392364823425, 144.5657439463449, 148.47776695177302,
    152.40959258449735, 156.3608363030788, 160.3311282166309,
    164.32011226319517, 168.32744544842765, 172.35279713916279,
    176.39584840699735, 180.45629141754378, 184.53382886144948,
    188.6281734236716, 192.7390472878449, 196.86618167289001,
    201.00931639928152, 205.1681994826412, 209.34258675253685,
    213.53224149456327, 217.73693411395422, 221.95644181913033,
    226.1905483237276, 230.43904356577696, 234.70172344281826,
    238.97838956183432, 243.26884900298271, 247.57291409618688,
    251.89040220972319, 256.22113555000954, 260.56494097186322,
    264.92164979855278, 269.29109765101981, 273.67312428569369,
    278.06757344036612, 282.4742926876304, 286.89313329542699,
    291.32395009427029, 295.76660135076065, 300.22094864701415,
    304.68685676566872, 309.1641935801469, 313.65282994987905,
    318.1526396202093, 322.66349912672615, 327.1852877037752,
    331.71788719692847, 336.26118197919845, 340.81505887079902,
    345.37940706226686, 349.95411804077025, 354.53908551944079,
    359.1342053695754, 363.73937555556347, 368.35449607240474,
    372.97946888568902, 377.61419787391867, 382.25858877306001,
    386.91254912321756, 391.57598821732961, 396.24881705179155,
    400.93094827891576, 405.6222961611449, 410.32277652693733,
    415.03230672824964, 419.75080559954472, 424.47819341825709,
    429.21439186665157, 433.95932399501481, 438.71291418612117,
    443.47508812091894, 448.24577274538461, 453.02489623849613,
    457.81238798127816, 462.60817852687489, 467.4121995716082,
    472.22438392698058, 477.04466549258564, 481.87297922988796,
    486.70926113683936, 491.55344822329801, 496.40547848721764,
    501.26529089157924, 506.13282534203483, 511.00802266523596,
    515.89082458782241, 520.78117371604412, 525.67901351599517,
    530.58428829443358, 535.49694318016952, 540.41692410599762,
    545.34417779115483, 550.27865172428551, 555.22029414689484,
    560.16905403727310, 565.12488109487424, 570.08772572513419,
    575.05753902471020, 580.03427276713080, 585.01787938883899,
    590.00831197561786, 595.00552424938201, 600.00947055532743,
    605.02010584942377, 610.03738568623862, 615.06126620708494,
    620.09170412847732, 625.12865673089095, 630.17208184781020,
    635.22193785505965, 640.27818366040810, 645.34077869343503,
    650.40968289565524, 655.48485671088906, 660.56626107587351,
    665.65385741110595, 670.74760761191271, 675.84747403973688,
    680.95341951363753, 686.06540730199413, 691.18340111441080,
    696.30736509381404, 701.43726380873704, 706.57306224578736,
    711.71472580228999, 716.86222027910355, 722.01551187360133,
    727.17456717281584, 732.33935314673920, 737.50983714177733,
    742.68598687435122, 747.86777042464337, 753.05515623048404,
    758.24811308137441, 763.44661011264009, 768.65061679971711,
    773.86010295255835, 779.07503871016729, 784.29539453524569,
    789.52114120895885, 794.75224982581346, 799.98869178864345,
    805.23043880370301, 810.47746287586358, 815.72973630391016,
    820.98723167593789, 826.24992186484292, 831.51778002390620,
    836.79077958246978, 842.06889424170038, 847.35209797043842,
    852.64036500113298, 857.93366982585735,
], dtype=np.float64)
LOGFACTORIAL.flags.writeable = False


@optimized_jit
def lgamma(z: float) -> float:
    """Natural logarithm of the Gamma function.

    Args:
        z: Positive real argument. z <= 0 is outside the domain and
            falls through to the MAX_EXP sentinel.

    Returns:
        ln Gamma(z). Arguments at or below DBL_MIN return MAX_EXP, so the
        result stays usable in a later exp().
    """
    if 0.0 < z < 201.0 and z == int(z):
        return LOGFACTORIAL[int(z) - 1]

    if z > 12.0:
        a1 = 0.08333333333333333  # 1/12
        a2 = 0.002777777777777778  # 1/360
        a3 = 0.0007936507936507937  # 1/1260
        z2 = z * z
        out = (z - 0.5) * math.log(z) - z + LS2PI
        out += a1 / z - a2 / (z2 * z) + a3 / (z2 * z2 * z)
        return out

    if z >= 4.0:
        p0 = -2.12159572323e+05
        p1 = 2.30661510616e+05
        p2 = 2.74647644705e+04
        p3 = -4.02621119975e+04
        p4 = -2.29660729780e+03
        q0 = -1.16328495004e+05
        q1 = -1.46025937511e+05
        q2 = -2.42357409629e+04
        q3 = -5.70691009324e+02
        return ((((p4 * z + p3) * z + p2) * z + p1) * z + p0) / \
            ((((z + q3) * z + q2) * z + q1) * z + q0)

    if z > 1.5:
        p0 = -7.83359299449e+01
        p1 = -1.42046296688e+02
        p2 = 1.37519416416e+02
        p3 = 7.86994924154e+01
        p4 = 4.16438922228
        q0 = 4.70668766060e+01
        q1 = 3.13399215894e+02
        q2 = 2.63505074721e+02
        q3 = 4.33400022514e+01
        return (z - 2.0) * ((((p4 * z + p3) * z + p2) * z + p1) * z + p0) / \
            ((((z + q3) * z + q2) * z + q1) * z + q0)

    p0 = -2.66685511495
    p1 = -2.44387534237e+01
    p2 = -2.19698958928e+01
    p3 = 1.11667541262e+01
    p4 = 3.13060547623
    q0 = 6.07771387771e-01
    q1 = 1.19400905721e+01
    q2 = 3.14690115749e+01
    q3 = 1.52346874070e+01

    if z >= 0.5:
        return (z - 1.0) * ((((p4 * z + p3) * z + p2) * z + p1) * z + p0) / \
            ((((z + q3) * z + q2) * z + q1) * z + q0)

    if z > DBL_EPSILON:
        # ln Gamma(z) = ln Gamma(z + 1) - ln z, with z + 1 inside the fit
        x = z + 1.0
        return z * ((((p4 * x + p3) * x + p2) * x + p1) * x + p0) / \
            ((((x + q3) * x + q2) * x + q1) * x + q0) - math.log(z)

    if z > DBL_MIN:
        return -math.log(z)

    return MAX_EXP
