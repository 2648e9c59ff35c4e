from pdftext.pdf.base import join_pages


class TestJoinPages:
    def test_skips_blank_and_missing_pages(self) -> None:
        pages = ["Invoice 42", None, "", "   \n", "Total: 10 EUR"]

        assert join_pages(pages) == "Invoice 42\nTotal: 10 EUR"

    def test_only_blank_pages(self) -> None:
        assert join_pages([None, " ", "\n\n"]) == ""

    def test_no_pages(self) -> None:
        assert join_pages([]) == ""

    def test_outer_whitespace_is_trimmed(self) -> None:
        assert join_pages(["\n  first", "second  \n"]) == "first\nsecond"

    def test_accepts_a_generator(self) -> None:
        assert join_pages(text for text in ("a", None, "b")) == "a\nb"

    def test_each_page_is_trimmed(self) -> None:
        assert join_pages(["Cover letter\n", "Signature page\n"]) == "Cover letter\nSignature page"
