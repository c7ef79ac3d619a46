"""Tests for lumenmark utility modules."""

import logging


class TestGetLogger:
    """Tests for get_logger."""

    def test_prefixes_name(self) -> None:
        from lumenmark.utils.logger import get_logger

        assert get_logger("mymodule").name == "lumenmark.mymodule"

    def test_keeps_package_names(self) -> None:
        from lumenmark.utils.logger import get_logger

        assert get_logger("lumenmark.lexer").name == "lumenmark.lexer"
        assert get_logger("lumenmark").name == "lumenmark"

    def test_returns_stdlib_logger(self) -> None:
        from lumenmark.utils.logger import get_logger

        assert isinstance(get_logger("x"), logging.Logger)

    def test_degradation_logged(self, caplog) -> None:
        from lumenmark import parse

        with caplog.at_level(logging.DEBUG, logger="lumenmark"):
            parse("| A |\n|---|")
        assert any("Dropping table" in record.getMessage() for record in caplog.records)


class TestStringBuilder:
    """Tests for StringBuilder."""

    def test_chaining(self) -> None:
        from lumenmark.stringbuilder import StringBuilder

        sb = StringBuilder()
        sb.append("a").append("").append_line("b").append_line()
        assert sb.build() == "ab\n\n"
        assert len(sb) == 4


class TestSourceLocation:
    """Tests for SourceLocation."""

    def test_str(self) -> None:
        from lumenmark.location import SourceLocation

        assert str(SourceLocation(3, 5)) == "3-5"
        assert str(SourceLocation(2, 2, "a.md")) == "a.md:2"

    def test_line_count(self) -> None:
        from lumenmark.location import SourceLocation

        assert SourceLocation(3, 5).line_count == 3
