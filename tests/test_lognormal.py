import math

import numpy as np
import pytest

from statcore.distributions import LogNormal, Normal
from statcore.distributions.normal import LN_SQRT_2PI
from statcore.errors import BadParams

INF = math.inf


@pytest.mark.parametrize(
    "mean,std_dev",
    [(10.0, 0.1), (-5.0, 1.0), (0.0, 10.0), (10.0, 100.0), (-5.0, INF)],
)
def test_create(mean: float, std_dev: float) -> None:
    dist = LogNormal.new(mean, std_dev)
    assert dist.mu == mean
    assert dist.sigma == std_dev


@pytest.mark.parametrize(
    "mean,std_dev",
    [(0.0, 0.0), (math.nan, 1.0), (1.0, math.nan), (math.nan, math.nan), (1.0, -1.0)],
)
def test_bad_create(mean: float, std_dev: float) -> None:
    with pytest.raises(BadParams):
        LogNormal(mean, std_dev)


def test_not_equal_to_normal_with_same_parameters() -> None:
    assert LogNormal(1.0, 1.0) != Normal(1.0, 1.0)


@pytest.mark.parametrize(
    "mean,std_dev,expected,rel",
    [
        (-1.0, 0.1, 0.001373811865368952608715, 1e-13),
        (-1.0, 1.5, 10.898468544015731954, 1e-14),
        (-1.0, 2.5, 36245.39726189994988081, 1e-14),
        (-0.1, 1.5, 65.93189259328902509552, 1e-14),
        (0.1, 2.5, 327115.1995809995715014, 1e-14),
        (1.5, 1.5, 1617.476145997433210727, 1e-14),
        (2.5, 2.5, 39747904.47781154725843, 1e-15),
        (5.5, 1.5, 4821628.436260521100027, 1e-14),
        (5.5, 2.5, 16035449147.34799637823, 1e-14),
        (5.5, 5.5, 1.127341399856331737823e31, 1e-13),
    ],
)
def test_variance(mean: float, std_dev: float, expected: float, rel: float) -> None:
    assert LogNormal(mean, std_dev).variance() == pytest.approx(expected, rel=rel)


def test_variance_reference_value_is_exact() -> None:
    assert LogNormal(2.5, 2.5).variance() == 39747904.47781154725843


def test_std_dev_is_root_of_variance() -> None:
    dist = LogNormal(0.1, 1.5)
    assert dist.std_dev() == math.sqrt(dist.variance())


@pytest.mark.parametrize(
    "mean,std_dev,expected",
    [
        (-1.0, 0.1, -1.8836465597893728867265104870209210873020761202386),
        (-1.0, 1.5, 0.82440364131283712375834285186996677643338789710028),
        (-0.1, 2.5, 2.2352292650788278014127418250478460091933403530919),
        (0.1, 5.5, 3.223686625443097981976156316038353073725762533669),
        (1.5, 0.1, 0.6163534402106271132734895129790789126979238797614),
        (2.5, 2.5, 4.835229265078827806963856948173628711311498693546),
        (5.5, 5.5, 8.6236866254430979764250411929125703716076041932149),
    ],
)
def test_entropy(mean: float, std_dev: float, expected: float) -> None:
    assert LogNormal(mean, std_dev).entropy() == pytest.approx(expected, rel=1e-14)


@pytest.mark.parametrize(
    "std_dev,expected,rel",
    [
        (0.1, 0.30175909933883402945387113824982918009810212213629, 1e-13),
        (1.5, 33.46804679732172529147579024311650645764144530123, 1e-14),
        (2.5, 11824.007933610287521341659465200553739278936344799, 1e-14),
        (5.5, 50829064464591483629.132631635472412625371367420496, 1e-13),
    ],
)
@pytest.mark.parametrize("mean", [-1.0, -0.1, 0.1, 1.5, 2.5, 5.5])
def test_skewness_ignores_mean(mean: float, std_dev: float, expected: float, rel: float) -> None:
    assert LogNormal(mean, std_dev).skewness() == pytest.approx(expected, rel=rel)


@pytest.mark.parametrize(
    "mean,std_dev,expected",
    [
        (-1.0, 0.1, 0.36421897957152331652213191863106773137983085909534),
        (-1.0, 5.5, 0.000000000000026810038677818032221548731163905979029274677187036),
        (0.1, 1.5, 0.11648415777349696821514223131929465848700730137808),
        (1.5, 2.5, 0.008651695203120634177071503957250390848166331197708),
        (2.5, 1.5, 1.2840254166877414840734205680624364583362808652815),
        (5.5, 0.1, 242.2572068579541371904816252345031593584721473492),
    ],
)
def test_mode(mean: float, std_dev: float, expected: float) -> None:
    assert LogNormal(mean, std_dev).mode() == pytest.approx(expected, rel=1e-14)


@pytest.mark.parametrize(
    "mean,expected",
    [
        (-1.0, 0.36787944117144232159552377016146086744581113103177),
        (-0.1, 0.90483741803595956814139238421693559530906465375738),
        (0.1, 1.1051709180756476309466388234587796577416634163742),
        (1.5, 4.4816890703380648226020554601192758190057498683697),
        (2.5, 12.182493960703473438070175951167966183182767790063),
        (5.5, 244.6919322642203879151889495118393501842287101075),
    ],
)
@pytest.mark.parametrize("std_dev", [0.1, 1.5, 2.5, 5.5])
def test_median_ignores_std_dev(mean: float, std_dev: float, expected: float) -> None:
    median = LogNormal(mean, std_dev).median()
    assert median is not None
    assert median == pytest.approx(expected, rel=1e-15)


def test_median_of_unit_scale() -> None:
    assert LogNormal(-1.0, 0.1).median() == math.exp(-1.0)


@pytest.mark.parametrize(
    "mean,std_dev,expected",
    [
        (-1.0, 0.1, 0.369723444544058982601),
        (-1.0, 5.5, 1362729.18425285481771),
        (-0.1, 5.5, 3351772.941252693807591),
        (1.5, 1.5, 13.80457418606709491926),
        (2.5, 2.5, 277.2722845231339804081),
        (5.5, 5.5, 906407915.0111549133446),
    ],
)
def test_mean(mean: float, std_dev: float, expected: float) -> None:
    assert LogNormal(mean, std_dev).mean() == pytest.approx(expected, rel=1e-14)


def test_min_max() -> None:
    for dist in (LogNormal(0.0, 0.1), LogNormal(-3.0, 10.0)):
        assert dist.min() == 0.0
        assert dist.max() == INF


@pytest.mark.parametrize(
    "mean,std_dev,x,expected",
    [
        (-0.1, 0.1, 0.8, 2.3363114904470413709866234247494393485647978367885),
        (-0.1, 1.5, 0.1, 0.90492497850024368541682348133921492204585092983646),
        (-0.1, 1.5, 0.5, 0.49191985207660942803818797602364034466489243416574),
        (-0.1, 2.5, 0.1, 1.0824698632626565182080576574958317806389057196768),
        (1.5, 1.5, 0.8, 0.17185785323404088913982425377565512294017306418953),
        (1.5, 2.5, 0.8, 0.15729636000661278918949298391170443742675565300598),
        (2.5, 1.5, 0.5, 0.055184331257528847223852028950484131834529030116388),
        (2.5, 2.5, 0.1, 0.25212505662402617595900822552548977822542300480086),
    ],
)
def test_pdf(mean: float, std_dev: float, x: float, expected: float) -> None:
    assert LogNormal(mean, std_dev).pdf(x) == pytest.approx(expected, rel=1e-13)


def test_pdf_far_tail() -> None:
    assert LogNormal(-0.1, 0.1).pdf(0.1) == pytest.approx(
        1.7968349035073582236359415565799753846986440127816e-104, rel=1e-10
    )
    # true value is ~5.7e-500, well below the smallest double
    assert LogNormal(2.5, 0.1).pdf(0.1) == 0.0


@pytest.mark.parametrize("x", [-0.1, -1.0, -1e300, -INF])
def test_negative_support_is_exact(x: float) -> None:
    dist = LogNormal(-0.1, 0.1)
    assert dist.pdf(x) == 0.0
    assert dist.cdf(x) == 0.0
    assert dist.ln_pdf(x) == -INF


def test_origin_takes_limiting_values() -> None:
    dist = LogNormal(0.0, 1.0)
    assert dist.pdf(0.0) == 0.0
    assert dist.cdf(0.0) == 0.0
    assert dist.ln_pdf(0.0) == -INF


@pytest.mark.parametrize("mean,std_dev", [(-0.1, 1.5), (1.5, 2.5), (2.5, 0.5)])
def test_ln_pdf_matches_log_of_pdf(mean: float, std_dev: float) -> None:
    dist = LogNormal(mean, std_dev)
    for x in (0.1, 0.5, 0.8, 1.0, 4.0, 20.0):
        assert dist.ln_pdf(x) == pytest.approx(math.log(dist.pdf(x)), rel=1e-12, abs=1e-12)


def test_cdf_matches_underlying_normal() -> None:
    dist = LogNormal(0.3, 0.7)
    base = Normal(0.3, 0.7)
    for x in (0.05, 0.5, 1.0, 2.0, 10.0):
        assert dist.cdf(x) == pytest.approx(base.cdf(math.log(x)), rel=1e-15)
    assert dist.cdf(math.exp(0.3)) == pytest.approx(0.5)
    assert dist.cdf(INF) == 1.0


def test_cdf_is_monotone() -> None:
    dist = LogNormal(1.0, 0.8)
    values = [dist.cdf(float(x)) for x in np.linspace(-2.0, 50.0, 400)]
    assert all(b >= a for a, b in zip(values, values[1:], strict=False))


def test_infinite_parameters_overflow_to_infinity() -> None:
    wide = LogNormal(0.0, INF)
    assert wide.variance() == INF
    assert wide.mean() == INF
    assert wide.skewness() == INF
    assert wide.entropy() == INF
    assert wide.mode() == 0.0
    huge = LogNormal(10.0, 100.0)
    assert huge.mean() == INF
    assert huge.variance() == INF
    assert huge.std_dev() == INF


def test_density_survives_underflowing_scale() -> None:
    # x * sigma rounds to zero for these inputs
    tiny = LogNormal(0.0, 0.1)
    assert tiny.pdf(5e-324) == 0.0
    d = math.log(5e-324) / 0.1
    expected = -0.5 * d * d - LN_SQRT_2PI - (math.log(5e-324) + math.log(0.1))
    assert tiny.ln_pdf(5e-324) == pytest.approx(expected)

    narrow = LogNormal(0.0, 1e-200)
    assert narrow.pdf(1e-200) == 0.0
    assert narrow.ln_pdf(1e-200) == -INF


def test_density_overflows_to_infinity_at_a_spike() -> None:
    x = 2.0**-1000
    spike = LogNormal(math.log(x), 1e-30)
    assert spike.pdf(x) == INF
    expected = -LN_SQRT_2PI - math.log(x) - math.log(1e-30)
    assert spike.ln_pdf(x) == pytest.approx(expected)
