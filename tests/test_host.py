from uitransition.host.memory import InMemoryHost, Node
from uitransition.host.styles import StyleSheet


class TestInMemoryHost:
    def test_mount_and_unmount_are_idempotent(self):
        host = InMemoryHost()

        host.mount()
        host.mount()
        assert host.has_node
        assert host.mount_count == 1

        host.unmount()
        host.unmount()
        assert host.current_node() is None
        assert host.unmount_count == 1

    def test_staged_props_wait_for_commit(self):
        host = InMemoryHost(class_name="base")
        host.mount()
        host.stage(class_name="next", title="hello")

        assert host.current_node().class_name == "base"
        assert host.staged == {"class_name": "next", "title": "hello"}

        host.commit()

        node = host.current_node()
        assert node.class_name == "next"
        assert node.props == {"title": "hello"}
        assert host.staged == {}

    def test_hint_joins_base_class(self):
        host = InMemoryHost(className="card")
        host.mount()

        host.apply_hint("fade-in")

        assert host.current_node().class_list == ["card", "fade-in"]
        assert host.current_node().has_class("fade-in")

    def test_hint_without_node_is_noop(self):
        host = InMemoryHost()

        host.apply_hint("anything")

        assert host.current_node() is None

    def test_latest_class_name_alias_wins(self):
        host = InMemoryHost()
        host.mount()

        host.stage(class_name="old")
        host.commit()
        host.stage(className="new")
        host.commit()

        assert host.current_node().class_name == "new"
        assert host.staged == {}

    def test_remount_applies_committed_props(self):
        host = InMemoryHost()
        host.stage(class_name="kept")
        host.commit()

        host.mount()

        assert host.current_node().class_name == "kept"


def test_node_class_name_skips_empty_parts():
    assert Node(base_class="", hint="").class_name == ""
    assert Node(base_class="a b", hint="").class_list == ["a", "b"]


class TestStyleSheet:
    def test_inject_once(self):
        sheet = StyleSheet()

        assert sheet.inject(".a { color: red; }")
        assert not sheet.inject(".a { color: red; }")
        assert sheet.inject(".b { color: blue; }")

        assert len(sheet) == 2
        assert sheet.text == "\n.a { color: red; }\n.b { color: blue; }"

    def test_reset_clears_rules(self):
        sheet = StyleSheet()
        sheet.inject(".a {}")

        sheet.reset()

        assert sheet.rules == []
        assert sheet.inject(".a {}")

    def test_instances_do_not_share_state(self):
        first, second = StyleSheet(), StyleSheet()
        first.inject(".a {}")

        assert second.rules == []
