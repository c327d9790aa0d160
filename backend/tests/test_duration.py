from roadtrip_ai.core.defaults import MAX_DAYS_MESSAGE, MONTHS_REJECTED_MESSAGE
from roadtrip_ai.query.duration import extract_duration, validate_days


def test_days_are_read_from_text():
    assert extract_duration("Roadtrip de 10 jours en Islande").days == 10
    assert extract_duration("roadtrip 7j").days == 7
    assert extract_duration("a 5 day trip").days == 5


def test_weeks_are_converted_to_days():
    result = extract_duration("2 semaines en Italie")
    assert result.days == 14
    assert result.error is None
    assert extract_duration("1 week in Spain").days == 7


def test_ceiling_is_inclusive():
    assert extract_duration("15 jours au Portugal").days == 15
    over = extract_duration("16 jours au Portugal")
    assert over.days is None
    assert over.error == MAX_DAYS_MESSAGE


def test_weeks_above_ceiling_are_rejected():
    assert extract_duration("3 semaines en Écosse").error == MAX_DAYS_MESSAGE


def test_months_are_always_rejected():
    result = extract_duration("Roadtrip de 1 mois au Canada")
    assert result.days is None
    assert result.error == MONTHS_REJECTED_MESSAGE


def test_missing_or_zero_duration_is_not_an_error():
    for text in ("Roadtrip en Italie", "0 jours en Grèce", "", None):
        result = extract_duration(text)
        assert result.days is None
        assert result.error is None


def test_first_duration_wins():
    assert extract_duration("10 jours, ou peut-être 3 semaines").days == 10


def test_validate_days():
    assert validate_days(12).days == 12
    assert validate_days(20).error == MAX_DAYS_MESSAGE


def test_validate_days_treats_non_positive_as_missing():
    for days in (0, -3):
        result = validate_days(days)
        assert result.days is None
        assert result.error is None
