import datetime

import pytest

import launcher
from launch_plan import LaunchPlan
from launcher import ScheduledLauncher, update


def at(h, m, s=0):
    return datetime.datetime(2024, 5, 1, h, m, s)


def launches(effects):
    return [e for e in effects if e["type"] == "launch"]


@pytest.fixture
def plan():
    p = LaunchPlan()
    update(p, {"type": "watch_time_changed", "text": "13:20"})
    update(p, {"type": "offset_changed", "text": "20"})
    update(p, {"type": "file_selected", "path": "C:\\video.mp4"})
    return p


# ── field edits ────────────────────────────────────────────────────────────
def test_valid_watch_time_sets_target_and_clears_info():
    p = LaunchPlan(info="old message")
    assert update(p, {"type": "watch_time_changed", "text": "07:45"}) == []
    assert p.target_time == (7, 45)
    assert p.info == ""


@pytest.mark.parametrize("bad", ["13", "ab:cd", "25:00"])
def test_malformed_watch_time_keeps_previous(bad):
    p = LaunchPlan(target_time=(13, 20))
    update(p, {"type": "watch_time_changed", "text": bad})
    assert p.target_time == (13, 20)
    assert p.info


def test_bad_offset_keeps_previous_value():
    p = LaunchPlan(start_offset_seconds=15)
    update(p, {"type": "offset_changed", "text": "abc"})
    assert p.start_offset_seconds == 15
    assert p.info != ""


def test_cancelled_dialog_keeps_path():
    p = LaunchPlan(media_path="/old.mp4")
    assert update(p, {"type": "file_selected", "path": None}) == []
    assert p.media_path == "/old.mp4"


def test_selected_file_requests_probe():
    p = LaunchPlan()
    effects = update(p, {"type": "file_selected", "path": "/movies/a.mkv"})
    assert p.media_path == "/movies/a.mkv"
    assert effects == [{"type": "probe_media", "path": "/movies/a.mkv"}]


def test_stale_probe_result_is_ignored():
    p = LaunchPlan(media_path="/b.mp4")
    update(p, {"type": "media_probed", "path": "/a.mp4", "seconds": 99.0})
    assert p.media_length == 0.0
    update(p, {"type": "media_probed", "path": "/b.mp4", "seconds": 12.5})
    assert p.media_length == 12.5


# ── arm / tick ─────────────────────────────────────────────────────────────
def test_arm_subscribes_once(plan):
    assert update(plan, {"type": "start"}) == [{"type": "subscribe_ticks"}]
    assert plan.armed
    assert plan.info == "Please wait to 13:20"
    # already armed: self-loop, no second subscription
    assert update(plan, {"type": "start"}) == []
    assert plan.armed


def test_non_matching_ticks_never_fire(plan):
    update(plan, {"type": "start"})
    for now in (at(13, 19, 59), at(13, 21), at(1, 20), at(0, 0)):
        assert update(plan, {"type": "tick", "now": now}) == []
    assert plan.armed


def test_idle_tick_in_target_minute_does_nothing(plan):
    assert update(plan, {"type": "tick", "now": at(13, 20, 5)}) == []
    assert not plan.armed


def test_matching_tick_fires_exactly_once(plan):
    update(plan, {"type": "start"})
    effects = update(plan, {"type": "tick", "now": at(13, 20, 5)})

    assert launches(effects) == [{"type": "launch", "offset": 20, "path": "C:\\video.mp4"}]
    assert {"type": "unsubscribe_ticks"} in effects
    assert plan.armed is False

    for s in range(6, 60):
        assert update(plan, {"type": "tick", "now": at(13, 20, s)}) == []


def test_seconds_do_not_matter(plan):
    update(plan, {"type": "start"})
    assert launches(update(plan, {"type": "tick", "now": at(13, 20, 59)}))


def test_rearm_after_firing(plan):
    update(plan, {"type": "start"})
    update(plan, {"type": "tick", "now": at(13, 20)})
    assert update(plan, {"type": "start"}) == [{"type": "subscribe_ticks"}]
    assert len(launches(update(plan, {"type": "tick", "now": at(13, 20, 30)}))) == 1


def test_armed_without_target_never_fires():
    p = LaunchPlan()
    update(p, {"type": "start"})
    assert p.info == "Please wait to --:--"
    assert update(p, {"type": "tick", "now": at(13, 20)}) == []
    assert p.armed


def test_launcher_methods_share_plan():
    p = LaunchPlan()
    sl = ScheduledLauncher(p)
    sl.set_target_time("08:00")
    sl.set_start_offset("3")
    sl.arm()
    effects = sl.on_tick(at(8, 0, 1))
    assert launches(effects)[0]["offset"] == 3
    assert p.armed is False


# ── dispatch ───────────────────────────────────────────────────────────────
def test_open_file_and_quit_are_forwarded():
    p = LaunchPlan()
    assert update(p, {"type": "open_file"}) == [{"type": "open_file_dialog"}]
    assert update(p, {"type": "quit"}) == [{"type": "quit"}]


def test_unknown_action_is_ignored(caplog):
    p = LaunchPlan()
    assert update(p, {"type": "rewind"}) == []
    assert "rewind" in caplog.text


def test_effects_stay_in_closed_set(plan):
    effects = []
    for act in ({"type": "start"}, {"type": "tick", "now": at(13, 20)},
                {"type": "open_file"}, {"type": "file_selected", "path": "/x"},
                {"type": "quit"}):
        effects += update(plan, act)
    assert {e["type"] for e in effects} <= launcher.EFFECT_TYPES
