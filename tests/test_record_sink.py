import pytest

from core.exceptions import RecordSinkError
from models.enums import AgeRange, FundingCapacity, InvestmentInstrument, InvestmentStatus
from models.session import SurveyRecord
from services.record_sink import FileRecordSink, RecordSink
from utils.formatters import format_record


def make_record(contact="+1234567890"):
    return SurveyRecord(
        age=AgeRange.EIGHTEEN_TO_TWENTY_FIVE,
        investment_status=InvestmentStatus.NO_EXPERIENCE,
        instrument=InvestmentInstrument.STOCKS,
        funding_capacity=FundingCapacity.OVER_10M,
        contact=contact,
    )


def test_format_record_block():
    assert format_record(make_record()) == (
        "Возраст:18-25\n"
        "Статус:Не было опыта\n"
        "Инструмент:Акции\n"
        "Бюджет:Более 10 миллионов\n"
        "Контакт:+1234567890\n"
    )


def test_blocks_are_appended_in_completion_order(tmp_path):
    path = tmp_path / "data.txt"
    sink = FileRecordSink(path)

    sink.append(make_record("+100"))
    sink.append(make_record("+200"))

    lines = path.read_text(encoding="utf-8").splitlines()
    assert len(lines) == 10
    assert lines[4] == "Контакт:+100"
    assert lines[5] == "Возраст:18-25"
    assert lines[9] == "Контакт:+200"
    assert sink.records_written == 2


def test_existing_content_is_preserved(tmp_path):
    path = tmp_path / "data.txt"
    path.write_text("Возраст:50+\n", encoding="utf-8")

    FileRecordSink(path).append(make_record())

    assert path.read_text(encoding="utf-8").startswith("Возраст:50+\nВозраст:18-25\n")


def test_missing_directory_is_created(tmp_path):
    path = tmp_path / "nested" / "data.txt"
    FileRecordSink(path).append(make_record())
    assert path.exists()


def test_incomplete_record_is_refused(tmp_path):
    sink = FileRecordSink(tmp_path / "data.txt")
    with pytest.raises(ValueError):
        sink.append(SurveyRecord(age=AgeRange.FIFTY_PLUS))
    assert not (tmp_path / "data.txt").exists()


def test_write_failure_raises_sink_error(tmp_path):
    # каталог вместо файла
    sink = FileRecordSink(tmp_path)
    with pytest.raises(RecordSinkError) as exc:
        sink.append(make_record())
    assert isinstance(exc.value.__cause__, OSError)
    assert sink.records_written == 0


def test_sink_interface_is_abstract():
    with pytest.raises(TypeError):
        RecordSink()
