import pytest

from idsort.filenames.identifier import IdentifierDeriver


@pytest.fixture()
def deriver() -> IdentifierDeriver:
    return IdentifierDeriver()


class TestNamePair:
    def test_strips_role_suffix(self, deriver: IdentifierDeriver) -> None:
        assert deriver.derive("john_smith_front.jpg") == "john_smith"

    def test_strips_trailing_counter(self, deriver: IdentifierDeriver) -> None:
        assert deriver.derive("jane_doe_selfie_2.png") == "jane_doe"

    def test_strips_leading_counter(self, deriver: IdentifierDeriver) -> None:
        assert deriver.derive("001_mary_jones_back.jpeg") == "mary_jones"

    def test_case_insensitive(self, deriver: IdentifierDeriver) -> None:
        assert deriver.derive("John_Smith_FRONT.JPG") == "john_smith"


class TestConcatenatedName:
    def test_splits_into_two_parts(self, deriver: IdentifierDeriver) -> None:
        result = deriver.derive("johnsmith.jpg")
        assert result is not None
        first, last = result.split("_")
        assert len(first) >= 2
        assert len(last) >= 2
        assert first + last == "johnsmith"

    def test_same_stem_gives_same_identifier(self, deriver: IdentifierDeriver) -> None:
        assert deriver.derive("jsmith_back.jpg") == deriver.derive("jsmith_selfie.jpg")


class TestSingleToken:
    def test_short_name_is_kept_whole(self, deriver: IdentifierDeriver) -> None:
        assert deriver.derive("smith.jpg") == "smith"


class TestUnresolvable:
    @pytest.mark.parametrize(
        "filename",
        ["1.jpg", "12345_dl.jpg", "ab.jpg", "x-y.jpg", "2024-05-01.png", "front.jpg"],
    )
    def test_returns_none(self, deriver: IdentifierDeriver, filename: str) -> None:
        assert deriver.derive(filename) is None
