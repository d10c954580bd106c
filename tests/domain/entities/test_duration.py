from mediameta.domain.entities.duration import ProbeDuration


def test_formatted_hour_minute_second():
    assert ProbeDuration(5, 0).formatted() == "0:00:05"
    assert ProbeDuration(3382, 41 * 10**15).formatted() == "0:56:22"
    assert ProbeDuration(90061, 0).formatted() == "25:01:01"
    assert str(ProbeDuration(0, 0)) == "0:00:00"


def test_fraction_is_truncated():
    assert ProbeDuration(59, 999 * 10**15).formatted() == "0:00:59"


def test_ordering():
    assert ProbeDuration(4, 10**17) < ProbeDuration(5, 0)
