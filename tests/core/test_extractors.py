"""
Test suite for format extractors and the parsing task.

Covers every built-in format heuristic, the fallback decode and the
parsing task's dispatch order and failure boundary.

System role: Verification of first ingestion stage
"""

import io
import json
import zipfile

import pytest

from knowledge_assistant.core.document_processing.extractors import (
    AudioVideoExtractor,
    FallbackExtractor,
    ImageExtractor,
    JsonExtractor,
    PdfExtractor,
    PlainTextExtractor,
    RtfExtractor,
    SpreadsheetExtractor,
    TextExtractor,
    WordExtractor,
)
from knowledge_assistant.core.document_processing.models import UploadedFile
from knowledge_assistant.core.document_processing.tasks.parsing_task import ParsingTask


def make_zip(members: dict[str, str]) -> bytes:
    """Build an in-memory zip archive (an Office Open XML container)."""
    buffer = io.BytesIO()
    with zipfile.ZipFile(buffer, "w") as archive:
        for name, content in members.items():
            archive.writestr(name, content)
    return buffer.getvalue()


def upload(name: str, data: bytes = b"", media_type: str = "") -> UploadedFile:
    return UploadedFile(file_name=name, data=data, media_type=media_type)


class TestUploadedFile:
    """UploadedFile helpers."""

    def test_extension_should_be_lower_cased(self) -> None:
        assert upload("Report.PDF").extension == "pdf"

    def test_extension_should_be_empty_without_dot(self) -> None:
        assert upload("Makefile").extension == ""

    def test_metadata_should_describe_file(self) -> None:
        # Arrange
        item = UploadedFile(
            file_name="a.txt",
            data=b"abc",
            media_type="text/plain",
            last_modified=0,
        )

        # Act
        metadata = item.metadata()

        # Assert
        assert metadata.name == "a.txt"
        assert metadata.size == 3
        assert metadata.type == "text/plain"
        assert metadata.last_modified.startswith("1970-01-01T00:00:00")


class TestPlainTextExtractor:
    """Verbatim text decoding."""

    def test_markdown_should_decode_verbatim(self) -> None:
        item = upload("notes.md", b"# Title\n\nBody text")

        assert PlainTextExtractor().extract(item) == "# Title\n\nBody text"

    def test_byte_order_mark_should_be_dropped(self) -> None:
        item = upload("notes.txt", b"\xef\xbb\xbfhello")

        assert PlainTextExtractor().extract(item) == "hello"

    def test_text_media_type_should_be_claimed_regardless_of_extension(self) -> None:
        assert PlainTextExtractor().handles(upload("export.data", media_type="text/csv"))

    def test_source_code_extension_should_be_claimed(self) -> None:
        assert PlainTextExtractor().handles(upload("main.py"))


class TestJsonExtractor:
    """JSON pretty-printing."""

    def test_valid_json_should_be_indented(self) -> None:
        # Arrange
        item = upload("data.json", b'{"a":1,"b":[1,2]}')

        # Act
        text = JsonExtractor().extract(item)

        # Assert
        assert text == json.dumps({"a": 1, "b": [1, 2]}, indent=2)

    def test_invalid_json_should_fall_back_to_raw_text(self) -> None:
        item = upload("broken.json", b'{"a": ')

        assert JsonExtractor().extract(item) == '{"a": '

    def test_json_media_type_should_be_claimed(self) -> None:
        assert JsonExtractor().handles(upload("payload", media_type="application/json"))


class TestPdfExtractor:
    """PDF literal-string harvesting."""

    def test_literal_strings_should_be_joined(self) -> None:
        # Arrange
        data = (
            b"%PDF-1.4 BT (Hello World from the document body) Tj "
            b"(  ) Tj (and a second literal string here) Tj ET"
        )

        # Act
        text = PdfExtractor().extract(upload("paper.pdf", data))

        # Assert
        assert text == "Hello World from the document body and a second literal string here"

    def test_sparse_literals_should_fall_back_to_printable_residue(self) -> None:
        # Arrange
        data = b"%PDF (Hi) \x00\x01 stream"

        # Act
        text = PdfExtractor().extract(upload("scan.pdf", data))

        # Assert
        assert text == "%PDF (Hi) stream"

    def test_unreadable_pdf_should_yield_placeholder(self) -> None:
        text = PdfExtractor().extract(upload("image.pdf", b"\x00\x01\x02"))

        assert text == (
            "[PDF file: image.pdf - Text extraction limited. "
            "Consider using a text-based format for better results.]"
        )


class TestWordExtractor:
    """Word-processor text runs."""

    def test_docx_archive_runs_should_be_joined_with_spaces(self) -> None:
        # Arrange
        data = make_zip(
            {
                "word/document.xml": (
                    "<w:document><w:body><w:p>"
                    "<w:r><w:t>Hello</w:t></w:r>"
                    '<w:r><w:t xml:space="preserve">World &amp; more</w:t></w:r>'
                    "</w:p></w:body></w:document>"
                ),
                "docProps/app.xml": "<w:t>ignored</w:t>",
            }
        )

        # Act
        text = WordExtractor().extract(upload("letter.docx", data))

        # Assert
        assert text == "Hello World & more"

    def test_flat_xml_should_be_scanned_directly(self) -> None:
        text = WordExtractor().extract(upload("old.doc", b"junk<w:t>Raw run</w:t>junk"))

        assert text == "Raw run"

    def test_no_runs_should_yield_placeholder(self) -> None:
        text = WordExtractor().extract(upload("empty.docx", b"\x00\x01"))

        assert text.startswith("[Word document: empty.docx - Text extraction limited.")

    def test_presentation_media_type_should_not_be_claimed(self) -> None:
        item = upload(
            "slides.pptx",
            media_type="application/vnd.openxmlformats-officedocument.presentationml.presentation",
        )

        assert not WordExtractor().handles(item)

    def test_wordprocessing_media_type_should_be_claimed(self) -> None:
        item = upload(
            "download",
            media_type="application/vnd.openxmlformats-officedocument.wordprocessingml.document",
        )

        assert WordExtractor().handles(item)


class TestSpreadsheetExtractor:
    """Spreadsheet cell text."""

    def test_shared_strings_should_be_joined_with_pipes(self) -> None:
        # Arrange
        data = make_zip(
            {"xl/sharedStrings.xml": "<sst><si><t>Name</t></si><si><t>Score</t></si></sst>"}
        )

        # Act
        text = SpreadsheetExtractor().extract(upload("book.xlsx", data))

        # Assert
        assert text == "Name | Score"

    def test_no_cells_should_yield_placeholder(self) -> None:
        text = SpreadsheetExtractor().extract(upload("book.xlsx", b"\x00"))

        assert text == "[Excel file: book.xlsx]"


class TestRtfExtractor:
    """RTF control-word stripping."""

    def test_control_words_should_be_removed(self) -> None:
        text = RtfExtractor().extract(upload("doc.rtf", b"\\b Bold\\b0  text"))

        assert text == "Bold   text"

    def test_brace_groups_should_be_removed(self) -> None:
        text = RtfExtractor().extract(upload("doc.rtf", b"{\\*\\generator Foo}Plain words"))

        assert text == "Plain words"


class TestMediaExtractors:
    """Metadata placeholders for media files."""

    def test_image_placeholder_should_report_kib(self) -> None:
        item = upload("pic.png", b"\x00" * 2048, "image/png")

        assert ImageExtractor().extract(item) == (
            "[Image file: pic.png, Size: 2.00 KB, Type: image/png]"
        )

    def test_audio_placeholder_should_report_mib(self) -> None:
        item = upload("song.mp3", b"\x00" * 1024 * 1024, "audio/mpeg")

        assert AudioVideoExtractor().extract(item) == (
            "[Media file: song.mp3, Size: 1.00 MB, Type: audio/mpeg]"
        )


class TestFallbackExtractor:
    """Unrecognized formats."""

    def test_readable_text_should_be_kept(self) -> None:
        item = upload("data.xyz", b"plain readable data\nsecond line")

        assert FallbackExtractor().extract(item) == "plain readable data\nsecond line"

    def test_invalid_utf8_should_yield_binary_placeholder(self) -> None:
        item = upload("blob.bin", b"\xff\xfe\x00")

        assert FallbackExtractor().extract(item) == (
            "[Binary file: blob.bin, Size: 0.00 KB, Type: unknown]"
        )

    def test_mostly_unprintable_text_should_yield_preview(self) -> None:
        item = upload("odd.dat", b"\x00\x01\x02\x03ab")

        assert FallbackExtractor().extract(item) == "[File: odd.dat]\nab"

    def test_preview_should_be_capped(self) -> None:
        # Arrange
        item = upload("odd.dat", b"\x00" * 100 + b"abcdef")

        # Act
        text = FallbackExtractor(max_preview_chars=3).extract(item)

        # Assert
        assert text == "[File: odd.dat]\nabc"


class ExplodingExtractor(TextExtractor):
    """Extractor that claims everything and always fails."""

    def handles(self, upload: UploadedFile) -> bool:
        return True

    def extract(self, upload: UploadedFile) -> str:
        raise RuntimeError("corrupt stream")


class TestParsingTask:
    """Dispatch order and failure boundary."""

    @pytest.mark.parametrize(
        "file_name, media_type, expected",
        [
            ("notes.txt", "", PlainTextExtractor),
            ("data.json", "", JsonExtractor),
            ("paper.pdf", "", PdfExtractor),
            ("letter.docx", "", WordExtractor),
            ("book.xlsx", "", SpreadsheetExtractor),
            ("doc.rtf", "", RtfExtractor),
            ("pic.jpg", "image/jpeg", ImageExtractor),
            ("clip.mp4", "video/mp4", AudioVideoExtractor),
            ("blob.bin", "", FallbackExtractor),
        ],
    )
    def test_select_extractor_should_dispatch_by_format(
        self, file_name: str, media_type: str, expected: type
    ) -> None:
        extractor = ParsingTask().select_extractor(upload(file_name, media_type=media_type))

        assert isinstance(extractor, expected)

    def test_parse_should_return_extracted_text(self, text_upload: UploadedFile) -> None:
        text = ParsingTask().parse(text_upload)

        assert text == "Photosynthesis converts light into chemical energy."

    def test_extractor_failure_should_yield_placeholder(self, text_upload: UploadedFile) -> None:
        # Arrange
        task = ParsingTask(extractors=[ExplodingExtractor()])

        # Act
        text = task.parse(text_upload)

        # Assert
        assert text == "[File: notes.txt - Could not extract content]"
