"""Tests für Uhrzeiten, Zeitbereiche, gespeicherte Auswahl und ScheduleModel."""

from pathlib import Path

import pytest

from analysis.interval_validator import END_BEFORE_START, OVERLAP
from models.interval import Interval
from models.schedule_model import (
    WEEKDAYS,
    ScheduleModel,
    UnknownDayError,
    UnknownIntervalError,
)
from models.selection import SavedSelection, TimeRange
from models.time_of_day import format_time, parse_time


# ─── UHRZEIT ──────────────────────────────────────────────────────────────────

class TestTimeOfDay:
    @pytest.mark.parametrize("value, expected", [
        ("00:00", 0),
        ("09:00", 540),
        ("9:05", 545),
        ("23:59", 1439),
        ("17:30:00", 1050),
        (" 08:15 ", 495),
    ])
    def test_parse_valid(self, value: str, expected: int):
        assert parse_time(value) == expected

    @pytest.mark.parametrize("value", [
        "", None, "24:00", "12:60", "abc", "12", "12:5", "-1:00", "12:00:99",
    ])
    def test_parse_invalid_is_absent(self, value):
        """Ungültige Eingaben werden zu None, nie zu 0."""
        assert parse_time(value) is None

    def test_format_zero_padded(self):
        assert format_time(0) == "00:00"
        assert format_time(545) == "09:05"
        assert format_time(1439) == "23:59"

    def test_format_out_of_range_raises(self):
        with pytest.raises(ValueError):
            format_time(1440)


class TestInterval:
    def test_incomplete(self):
        assert not Interval(id="a").is_complete
        assert not Interval(id="a", start=60).is_complete
        assert Interval(id="a", start=60, end=120).is_complete

    def test_labels(self):
        i = Interval(id="a", start=540)
        assert i.start_label == "09:00"
        assert i.end_label == ""
        assert str(i) == "09:00–--:--"

    def test_out_of_range_rejected(self):
        with pytest.raises(Exception):
            Interval(id="a", start=1440)


# ─── SCHEDULE MODEL ───────────────────────────────────────────────────────────

class TestScheduleModel:
    def test_all_weekdays_present(self):
        model = ScheduleModel()
        snap = model.snapshot()
        assert [d.day for d in snap.days] == list(WEEKDAYS)
        assert all(d.intervals == () for d in snap.days)

    def test_toggle_tag(self):
        """toggle_tag schaltet Mitgliedschaft um und setzt das Dirty-Flag."""
        model = ScheduleModel()
        assert model.toggle_tag("A") is True
        assert model.is_selected("A")
        assert model.tags_dirty
        model.mark_clean()
        assert model.toggle_tag("A") is False
        assert not model.is_selected("A")
        assert model.tags_dirty

    def test_tags_in_catalog_order(self):
        model = ScheduleModel(line_order=["1", "A", "C"])
        model.toggle_tag("X")
        model.toggle_tag("C")
        model.toggle_tag("1")
        assert model.selected_tags() == ("1", "C", "X")

    def test_add_interval_returns_unique_ids(self):
        model = ScheduleModel()
        a = model.add_interval("Monday")
        b = model.add_interval("Monday")
        c = model.add_interval("Tuesday")
        assert len({a, b, c}) == 3
        assert [i.id for i in model.intervals("Monday")] == [a, b]
        assert model.intervals("Monday")[0].start is None

    def test_set_endpoint_returns_fresh_result(self):
        model = ScheduleModel()
        a = model.add_interval("Monday")
        assert model.set_endpoint("Monday", a, "start", "09:00").is_valid
        result = model.set_endpoint("Monday", a, "end", "08:00")
        assert not result.is_valid
        assert result.message == END_BEFORE_START
        assert model.set_endpoint("Monday", a, "end", "10:00").is_valid

    def test_set_endpoint_empty_clears(self):
        """Leerer Wert → Endpunkt nicht gesetzt, Fehler verschwindet."""
        model = ScheduleModel()
        a = model.add_interval("Monday")
        model.set_endpoint("Monday", a, "start", "09:00")
        assert not model.set_endpoint("Monday", a, "end", "09:00").is_valid
        result = model.set_endpoint("Monday", a, "end", "")
        assert result.is_valid
        assert model.intervals("Monday")[0].end is None

    def test_set_endpoint_garbage_is_absent(self):
        model = ScheduleModel()
        a = model.add_interval("Monday")
        model.set_endpoint("Monday", a, "start", "quatsch")
        assert model.intervals("Monday")[0].start is None

    def test_set_endpoint_invalid_which(self):
        model = ScheduleModel()
        a = model.add_interval("Monday")
        with pytest.raises(ValueError):
            model.set_endpoint("Monday", a, "middle", "09:00")

    def test_set_endpoint_unknown_interval(self):
        model = ScheduleModel()
        with pytest.raises(UnknownIntervalError):
            model.set_endpoint("Monday", "iv999", "start", "09:00")

    def test_unknown_day(self):
        model = ScheduleModel()
        with pytest.raises(UnknownDayError):
            model.add_interval("Funday")
        with pytest.raises(ValueError):
            model.validate_day("monday")

    def test_remove_interval_twice_is_noop(self):
        """Doppeltes Entfernen (UI-Doppelklick) ist kein Fehler."""
        model = ScheduleModel()
        a = model.add_interval("Friday")
        model.remove_interval("Friday", a)
        model.remove_interval("Friday", a)
        assert model.intervals("Friday") == ()

    def test_remove_only_interval_clears_error(self):
        """Entfernen des einzigen fehlerhaften Bereichs → Tag wieder gültig."""
        model = ScheduleModel()
        a = model.add_interval("Monday")
        model.set_endpoint("Monday", a, "start", "09:00")
        model.set_endpoint("Monday", a, "end", "09:00")
        assert not model.validate_day("Monday").is_valid
        result = model.remove_interval("Monday", a)
        assert result.is_valid
        assert model.validate_day("Monday").is_valid

    def test_overlap_detected_after_edit(self):
        model = ScheduleModel()
        a = model.add_interval("Wednesday")
        b = model.add_interval("Wednesday")
        model.set_endpoint("Wednesday", a, "start", "09:00")
        model.set_endpoint("Wednesday", a, "end", "12:00")
        model.set_endpoint("Wednesday", b, "start", "11:00")
        result = model.set_endpoint("Wednesday", b, "end", "13:00")
        assert result.message == OVERLAP
        assert result.flags(a, "end")
        assert result.flags(b, "start")
        # Andere Tage bleiben unberührt
        assert model.validate_day("Thursday").is_valid


class TestSnapshot:
    def test_snapshot_isolated_from_later_mutation(self):
        """Spätere Mutation verändert einen bereits erstellten Snapshot nicht."""
        model = ScheduleModel()
        model.toggle_tag("A")
        a = model.add_interval("Monday")
        model.set_endpoint("Monday", a, "start", "09:00")
        snap = model.snapshot()

        model.toggle_tag("B")
        model.set_endpoint("Monday", a, "start", "10:00")
        model.add_interval("Monday")

        assert snap.tags == ("A",)
        monday = snap.day("Monday")
        assert len(monday.intervals) == 1
        assert monday.intervals[0].start == 540

    def test_snapshot_immutable(self):
        snap = ScheduleModel().snapshot()
        with pytest.raises(Exception):
            snap.tags = ("X",)

    def test_snapshot_unknown_day(self):
        with pytest.raises(UnknownDayError):
            ScheduleModel().snapshot().day("Someday")


class TestListeners:
    def test_listener_receives_day_results(self):
        model = ScheduleModel()
        events = []
        model.subscribe(lambda day, result: events.append((day, result)))

        a = model.add_interval("Monday")
        model.set_endpoint("Monday", a, "start", "09:00")
        model.toggle_tag("A")

        assert [e[0] for e in events] == ["Monday", "Monday", None]
        assert all(r.is_valid for _, r in events[:2])
        assert events[2][1] is None

    def test_unsubscribe(self):
        model = ScheduleModel()
        events = []
        unsubscribe = model.subscribe(lambda day, result: events.append(day))
        unsubscribe()
        model.add_interval("Monday")
        assert events == []


# ─── GESPEICHERTE AUSWAHL ─────────────────────────────────────────────────────

class TestSavedSelection:
    def test_from_selection_prefills(self):
        selection = SavedSelection(
            lines=["C", "A"],
            times={
                "Monday": [TimeRange(start="09:00", end="17:00")],
                "Sunday": [TimeRange(start="", end="12:00")],
            },
        )
        model = ScheduleModel.from_selection(selection, line_order=["A", "C"])
        assert model.selected_tags() == ("A", "C")
        assert model.intervals("Monday")[0].start == 540
        sunday = model.intervals("Sunday")[0]
        assert sunday.start is None and sunday.end == 720
        assert not model.tags_dirty

    def test_from_selection_duplicate_lines(self):
        """Doppelte Linien im gespeicherten Stand heben sich nicht auf."""
        model = ScheduleModel.from_selection(SavedSelection(lines=["A", "A"]))
        assert model.selected_tags() == ("A",)

    def test_from_selection_skips_unknown_day(self):
        selection = SavedSelection(times={"Caturday": [TimeRange(start="09:00", end="10:00")]})
        model = ScheduleModel.from_selection(selection)
        assert all(model.intervals(d) == () for d in WEEKDAYS)

    def test_to_selection_only_complete(self):
        model = ScheduleModel()
        model.toggle_tag("A")
        a = model.add_interval("Tuesday")
        model.set_endpoint("Tuesday", a, "start", "7:05")
        model.set_endpoint("Tuesday", a, "end", "08:00")
        model.add_interval("Tuesday")
        sel = model.to_selection()
        assert sel.lines == ["A"]
        assert sel.times == {"Tuesday": [TimeRange(start="07:05", end="08:00")]}

    def test_save_and_load_json(self, tmp_path: Path):
        """SavedSelection → JSON → SavedSelection Roundtrip."""
        sel = SavedSelection(lines=["7"], times={"Friday": [TimeRange(start="18:00", end="20:00")]})
        path = tmp_path / "auswahl.json"
        sel.save_json(path)
        assert SavedSelection.load_json(path) == sel

    def test_load_json_nonexistent_raises(self, tmp_path: Path):
        with pytest.raises(FileNotFoundError):
            SavedSelection.load_json(tmp_path / "fehlt.json")

    def test_is_empty(self):
        assert SavedSelection().is_empty
        assert not SavedSelection(lines=["A"]).is_empty

    def test_default_lists_not_shared(self):
        a = SavedSelection()
        a.lines.append("A")
        a.times["Monday"] = []
        assert SavedSelection().lines == []
        assert SavedSelection().times == {}
