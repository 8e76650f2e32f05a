"""Tests for schedule.loader module."""

import os
from datetime import datetime
from pathlib import Path

import pytest

from schedule.errors import ScheduleLoadError
from schedule.loader import load_schedule, schedule_timestamp
from schedule.utils import format_timestamp

from tests.fixtures import make_combo, make_schedule_document, write_schedule_file


class TestLoadSchedule:
    """Tests for load_schedule function."""
    
    def test_load_valid_schedule(self, audio_dir: Path):
        document = make_schedule_document(
            [make_combo(["3", "same"], volumes=[4, 6], waits=[0, 90])],
            description="Night lure",
            control_nights=1,
            play_nights=4,
            start_day=2,
        )
        write_schedule_file(audio_dir, document)
        
        schedule = load_schedule(audio_dir, "schedule.json")
        
        assert schedule.description == "Night lure"
        assert schedule.control_nights == 1
        assert schedule.play_nights == 4
        assert schedule.start_day == 2
        assert len(schedule.combos) == 1
        combo = schedule.combos[0]
        assert combo.sounds == ["3", "same"]
        assert combo.volumes == [4, 6]
        assert combo.waits == [0, 90]
        assert combo.every == 1800
    
    def test_numeric_sound_ids_accepted(self, audio_dir: Path):
        document = make_schedule_document([make_combo([3, 7])])
        write_schedule_file(audio_dir, document)
        
        schedule = load_schedule(audio_dir, "schedule.json")
        
        assert schedule.combos[0].sounds == ["3", "7"]
    
    def test_extra_keys_ignored(self, audio_dir: Path):
        document = make_schedule_document([make_combo(["1"])])
        document["Schedule"]["AllSounds"] = [1, 2, 3]
        document["Version"] = 2
        write_schedule_file(audio_dir, document)
        
        schedule = load_schedule(audio_dir, "schedule.json")
        
        assert len(schedule.combos) == 1
    
    def test_missing_file_raises_error(self, audio_dir: Path):
        with pytest.raises(ScheduleLoadError) as exc_info:
            load_schedule(audio_dir, "schedule.json")
        
        assert exc_info.value.code == "FILE_NOT_FOUND"
        assert "path" in exc_info.value.details
    
    def test_directory_instead_of_file_raises_error(self, audio_dir: Path):
        (audio_dir / "schedule.json").mkdir()
        
        with pytest.raises(ScheduleLoadError) as exc_info:
            load_schedule(audio_dir, "schedule.json")
        
        assert exc_info.value.code == "READ_FAILED"
    
    def test_invalid_json_raises_error(self, audio_dir: Path):
        (audio_dir / "schedule.json").write_text("{not json", encoding="utf-8")
        
        with pytest.raises(ScheduleLoadError) as exc_info:
            load_schedule(audio_dir, "schedule.json")
        
        assert exc_info.value.code == "INVALID_JSON"
    
    def test_missing_schedule_key_raises_error(self, audio_dir: Path):
        (audio_dir / "schedule.json").write_text('{"Combos": []}', encoding="utf-8")
        
        with pytest.raises(ScheduleLoadError) as exc_info:
            load_schedule(audio_dir, "schedule.json")
        
        assert exc_info.value.code == "INVALID_SCHEDULE"
    
    def test_mismatched_lists_raise_error(self, audio_dir: Path):
        combo = make_combo(["1", "2"], volumes=[5], waits=[0, 0])
        write_schedule_file(audio_dir, make_schedule_document([combo]))
        
        with pytest.raises(ScheduleLoadError) as exc_info:
            load_schedule(audio_dir, "schedule.json")
        
        assert exc_info.value.code == "INVALID_SCHEDULE"
    
    def test_bad_time_raises_error(self, audio_dir: Path):
        combo = make_combo(["1"], from_time="half past six")
        write_schedule_file(audio_dir, make_schedule_document([combo]))
        
        with pytest.raises(ScheduleLoadError) as exc_info:
            load_schedule(audio_dir, "schedule.json")
        
        assert exc_info.value.code == "INVALID_SCHEDULE"
    
    def test_boolean_sound_raises_error(self, audio_dir: Path):
        combo = make_combo([True, "2"])
        write_schedule_file(audio_dir, make_schedule_document([combo]))
        
        with pytest.raises(ScheduleLoadError) as exc_info:
            load_schedule(audio_dir, "schedule.json")
        
        assert exc_info.value.code == "INVALID_SCHEDULE"
    
    def test_negative_waits_accepted(self, audio_dir: Path):
        combo = make_combo(["1", "2"], waits=[0, -120])
        write_schedule_file(audio_dir, make_schedule_document([combo]))
        
        schedule = load_schedule(audio_dir, "schedule.json")
        
        assert schedule.combos[0].waits == [0, -120]
    
    def test_error_str_includes_code(self, audio_dir: Path):
        with pytest.raises(ScheduleLoadError) as exc_info:
            load_schedule(audio_dir, "missing.json")
        
        assert str(exc_info.value).startswith("[FILE_NOT_FOUND]")


class TestScheduleTimestamp:
    """Tests for schedule_timestamp function."""
    
    def test_formats_modification_time(self, audio_dir: Path):
        path = write_schedule_file(audio_dir, make_schedule_document([]))
        mtime = datetime(2006, 1, 2, 15, 4, 5).timestamp()
        os.utime(path, (mtime, mtime))
        
        assert schedule_timestamp(audio_dir, "schedule.json") == "3:04PM, Monday January 2 2006"
    
    def test_matches_format_timestamp(self, audio_dir: Path):
        path = write_schedule_file(audio_dir, make_schedule_document([]))
        
        expected = format_timestamp(datetime.fromtimestamp(path.stat().st_mtime))
        
        assert schedule_timestamp(audio_dir, "schedule.json") == expected
    
    def test_missing_file_is_unknown(self, audio_dir: Path):
        assert schedule_timestamp(audio_dir, "schedule.json") == "Unknown."
