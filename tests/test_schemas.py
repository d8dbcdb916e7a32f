"""Tests for request models and the dict/str entry point (window.get_nir_args)."""

import pytest

from nirpilot.domain.errors import (
    BlankValueError,
    InvalidRequestError,
    NoLocatorFieldError,
    SizeRequiredError,
    UnknownActionError,
)
from nirpilot.domain.models import (
    ActiveWindow,
    ByClassName,
    ByProcess,
    ByTitle,
    GeometryAction,
    MatchMode,
    Rectangle,
    SimpleAction,
    WindowVerb,
)
from nirpilot.schemas import (
    Size,
    WindowActionRequest,
    WindowFind,
    coerce_action,
    coerce_locator,
)
from nirpilot.window import get_nir_args


class TestWindowFind:
    def test_class_name_alias(self):
        assert WindowFind.model_validate({"className": "HD"}).to_locator() == ByClassName("HD")

    def test_class_name_field_name(self):
        assert WindowFind(class_name="HD").to_locator() == ByClassName("HD")

    def test_title(self):
        find = WindowFind.model_validate({"title": {"value": "x", "match": "contains"}})
        assert find.to_locator() == ByTitle("x", MatchMode.CONTAINS)

    def test_process_keeps_int_and_str(self):
        assert WindowFind(process=12).to_locator() == ByProcess(12)
        assert WindowFind(process="p.exe").to_locator() == ByProcess("p.exe")

    def test_empty(self):
        with pytest.raises(NoLocatorFieldError):
            WindowFind().to_locator()

    def test_active_false_still_selects_active(self):
        assert WindowFind(active=False).to_locator() == ActiveWindow()

    def test_precedence_active_first(self):
        find = WindowFind.model_validate(
            {"active": True, "className": "HD", "title": {"value": "t"}, "process": 1}
        )
        assert find.to_locator() == ActiveWindow()

    def test_precedence_class_before_title(self):
        find = WindowFind.model_validate(
            {"className": "HD", "title": {"value": "t"}, "process": 1}
        )
        assert find.to_locator() == ByClassName("HD")

    def test_precedence_title_before_process(self):
        find = WindowFind.model_validate({"title": {"value": "t"}, "process": 1})
        assert find.to_locator() == ByTitle("t")


class TestWindowActionRequest:
    def test_simple(self):
        assert WindowActionRequest(action="flash").to_action() == SimpleAction(WindowVerb.FLASH)

    def test_size_ignored_for_simple_verbs(self):
        req = WindowActionRequest.model_validate(
            {"action": "min", "size": {"x": 1, "y": 2, "width": 3, "height": 4}}
        )
        assert req.to_action() == SimpleAction(WindowVerb.MINIMIZE)

    def test_geometry(self):
        req = WindowActionRequest.model_validate(
            {"action": "move", "size": {"x": 1, "y": 2, "width": 3, "height": 4}}
        )
        assert req.to_action() == GeometryAction(WindowVerb.MOVE, Rectangle(1, 2, 3, 4))

    def test_missing_size(self):
        with pytest.raises(SizeRequiredError):
            WindowActionRequest(action="setsize").to_action()

    def test_partial_size(self):
        with pytest.raises(SizeRequiredError):
            Size(x=1, y=2, width=3).to_rectangle()


class TestCoerce:
    def test_locator_passthrough(self):
        loc = ByProcess(5)
        assert coerce_locator(loc) is loc
        assert coerce_locator("notepad") == "notepad"

    def test_locator_none(self):
        with pytest.raises(NoLocatorFieldError):
            coerce_locator(None)

    def test_locator_bad_type(self):
        with pytest.raises(InvalidRequestError):
            coerce_locator(3.5)

    def test_locator_unknown_field(self):
        with pytest.raises(InvalidRequestError):
            coerce_locator({"handle": 1})

    def test_bad_match_mode(self):
        with pytest.raises(InvalidRequestError):
            coerce_locator({"title": {"value": "x", "match": "fuzzy"}})

    def test_action_from_dict(self):
        assert coerce_action({"action": "center"}) == SimpleAction(WindowVerb.CENTER)

    def test_action_unknown_verb_string(self):
        with pytest.raises(UnknownActionError):
            coerce_action("explode")

    def test_action_unknown_verb_dict(self):
        with pytest.raises(InvalidRequestError):
            coerce_action({"action": "explode"})

    def test_action_bad_type(self):
        with pytest.raises(InvalidRequestError):
            coerce_action(42)


class TestGetNirArgs:
    def test_string(self):
        assert get_nir_args("notepad", "min") == ["min", "title", "notepad"]

    def test_active(self):
        assert get_nir_args({"active": True}, "min") == ["min", "active"]

    def test_class_name(self):
        assert get_nir_args({"className": "HD"}, "min") == ["min", "class", "HD"]

    def test_process_number(self):
        assert get_nir_args({"process": 12}, "min") == ["min", "process", "/12"]

    def test_process_string(self):
        assert get_nir_args({"process": "p.exe"}, "min") == ["min", "process", "p.exe"]

    @pytest.mark.parametrize("key", ["match", "matchMode"])
    @pytest.mark.parametrize(
        "match, token",
        [
            ("exact", "title"),
            ("contains", "ititle"),
            ("endsWith", "etitle"),
            ("startsWith", "stitle"),
        ],
    )
    def test_title_match(self, key, match, token):
        res = get_nir_args({"title": {"value": "notepad", key: match}}, "min")
        assert res == ["min", token, "notepad"]

    def test_setsize(self):
        res = get_nir_args(
            "notepad",
            {"action": "setsize", "size": {"x": 1, "y": 2, "width": 3, "height": 4}},
        )
        assert res == ["setsize", "title", "notepad", "1", "2", "3", "4"]

    def test_all(self):
        res = get_nir_args(
            {"title": {"match": "contains", "value": "notepad"}},
            {"action": "setsize", "size": {"x": 1, "y": 2, "width": 3, "height": 4}},
        )
        assert res == ["setsize", "ititle", "notepad", "1", "2", "3", "4"]

    def test_setsize_without_size(self):
        with pytest.raises(SizeRequiredError, match="action.size"):
            get_nir_args({"title": {"match": "contains", "value": "notepad"}}, {"action": "setsize"})

    def test_empty_locator(self):
        with pytest.raises(NoLocatorFieldError, match="Parameter window should be valid"):
            get_nir_args({}, "min")

    @pytest.mark.parametrize(
        "action, error",
        [
            ({"action": "setsize"}, SizeRequiredError),
            ("move", SizeRequiredError),
            ("explode", UnknownActionError),
        ],
    )
    def test_action_error_reported_before_locator_error(self, action, error):
        with pytest.raises(error):
            get_nir_args({}, action)

    @pytest.mark.parametrize(
        "window, field",
        [
            ("", "window"),
            ("  ", "window"),
            ({"className": ""}, "className"),
            ({"process": ""}, "process"),
            ({"title": {"value": "  ", "match": "contains"}}, "value"),
        ],
    )
    def test_blank_values(self, window, field):
        with pytest.raises(BlankValueError) as exc_info:
            get_nir_args(window, "min")
        assert exc_info.value.field == field

    def test_idempotent(self):
        window = {"title": {"value": "notepad", "match": "startsWith"}}
        action = {"action": "move", "size": {"x": -1, "y": 0, "width": 10, "height": 20}}
        assert get_nir_args(window, action) == get_nir_args(window, action)
