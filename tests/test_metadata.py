from evmutils.metadata import Metadata


def test_defaults_are_empty():
    metadata = Metadata()
    assert metadata.name() == ""
    assert metadata.symbol() == ""


def test_name_and_symbol():
    metadata = Metadata("Example Token", "EXT")
    assert metadata.name() == "Example Token"
    assert metadata.symbol() == "EXT"


def test_keyword_construction():
    metadata = Metadata(symbol="SYM", name="Named")
    assert (metadata.name(), metadata.symbol()) == ("Named", "SYM")