import pytest

from pdftext.registry import AdapterRegistry


class _Alpha:
    pass


class _Beta:
    pass


def _make_registry() -> AdapterRegistry[object]:
    return AdapterRegistry("widget", {"alpha": _Alpha, "beta": _Beta})


class TestAdapterRegistry:
    def test_creates_registered_adapter(self) -> None:
        assert isinstance(_make_registry().create("beta"), _Beta)

    def test_lookup_is_case_insensitive(self) -> None:
        assert isinstance(_make_registry().create("ALPHA"), _Alpha)

    def test_each_call_returns_new_instance(self) -> None:
        registry = _make_registry()
        assert registry.create("alpha") is not registry.create("alpha")

    def test_unknown_name_lists_choices(self) -> None:
        with pytest.raises(ValueError, match=r"Unknown widget engine 'gamma'.*alpha.*beta"):
            _make_registry().create("gamma")

    def test_names(self) -> None:
        assert _make_registry().names == ["alpha", "beta"]
