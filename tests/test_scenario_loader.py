import textwrap

import pytest

from uitransition.core.states import TransitionState
from uitransition.core.timeout import SplitTimeout
from uitransition.io.loaders import LoaderError, load_scenario, load_scenarios


def _write(path, body: str):
    path.write_text(textwrap.dedent(body), encoding="utf-8")
    return path


def test_load_scenario(tmp_path):
    fp = _write(
        tmp_path / "fade.yaml",
        """
        transition:
          in: false
          timeout: {enter: 30, exit: 20}
          mountOnEnter: true
          entering_hint: fade-entering
        timeline:
          - at: 0
            in: true
            class_name: panel
          - at: 100
            in: false
        settle: 5
        """,
    )

    scenario = load_scenario(str(fp))

    assert scenario.name == "fade"
    assert isinstance(scenario.config.timeout, SplitTimeout)
    assert scenario.config.mount_on_enter is True
    assert scenario.config.hint_overrides()[TransitionState.ENTERING] == "fade-entering"
    assert scenario.timeline[0].changes == {"in": True, "class_name": "panel"}
    assert scenario.duration == 105


def test_explicit_name_wins(tmp_path):
    fp = _write(tmp_path / "a.yaml", "name: custom\ntransition: {timeout: 1}\n")

    assert load_scenario(str(fp)).name == "custom"


def test_invalid_timeout_reported_with_path(tmp_path):
    fp = _write(tmp_path / "bad.yaml", "transition:\n  timeout: {enter: 10}\n")

    with pytest.raises(LoaderError) as exc_info:
        load_scenario(str(fp))

    message = str(exc_info.value)
    assert "Invalid transition configuration" in message
    assert "bad.yaml" in message
    assert "timeout" in message


def test_missing_transition_section(tmp_path):
    fp = _write(tmp_path / "empty.yaml", "timeline: []\n")

    with pytest.raises(LoaderError) as exc_info:
        load_scenario(str(fp))
    assert "transition" in str(exc_info.value)


def test_timeline_must_be_ordered(tmp_path):
    fp = _write(
        tmp_path / "unordered.yaml",
        """
        transition: {timeout: 1}
        timeline:
          - at: 50
            in: true
          - at: 10
            in: false
        """,
    )

    with pytest.raises(LoaderError):
        load_scenario(str(fp))


def test_non_mapping_file(tmp_path):
    fp = _write(tmp_path / "list.yaml", "- 1\n- 2\n")

    with pytest.raises(LoaderError):
        load_scenario(str(fp))


def test_malformed_yaml(tmp_path):
    fp = _write(tmp_path / "broken.yaml", "transition: {timeout: [\n")

    with pytest.raises(LoaderError):
        load_scenario(str(fp))


def test_load_scenarios_from_directory(tmp_path):
    nested = tmp_path / "nested"
    nested.mkdir()
    _write(tmp_path / "b.yaml", "transition: {timeout: 1}\n")
    _write(nested / "a.yaml", "transition: {timeout: 2}\n")

    scenarios = load_scenarios(str(tmp_path))

    assert [s.name for s in scenarios] == ["b", "a"]
    assert load_scenarios(str(tmp_path / "missing")) == []
    assert [s.name for s in load_scenarios(str(tmp_path / "b.yaml"))] == ["b"]


def test_duplicate_scenario_names(tmp_path):
    _write(tmp_path / "one.yaml", "name: same\ntransition: {timeout: 1}\n")
    _write(tmp_path / "two.yaml", "name: same\ntransition: {timeout: 1}\n")

    with pytest.raises(LoaderError, match="Duplicate scenario name"):
        load_scenarios(str(tmp_path))
