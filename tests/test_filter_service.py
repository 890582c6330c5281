"""Tests for filter_service.py - EC2 filter translation"""

import json

import pytest

from nephele.exceptions import FilterError
from nephele.services.filter_service import (
    FILTER_MAP,
    title_case,
    expand_value,
    resolve_key,
    translate,
    translate_all,
    load_filters_file,
)


class TestFilterMap:
    """The fixed key table"""

    def test_supported_keys(self):
        assert FILTER_MAP == {
            "az": "availability-zone",
            "id": "instance-id",
            "name": "tag:Name",
            "state": "instance-state-name",
            "type": "instance-type",
        }

    def test_resolve_key(self):
        assert resolve_key("state") == "instance-state-name"

    def test_resolve_unknown_key(self):
        with pytest.raises(FilterError, match="invalid filter key: 'color'"):
            resolve_key("color")


class TestTitleCase:
    """Tests for title_case"""

    def test_single_word(self):
        assert title_case("web") == "Web"

    def test_words_split_by_punctuation_and_spaces(self):
        assert title_case("my-web server") == "My-Web Server"

    def test_keeps_inner_capitals(self):
        # str.title() would give "Webapp"
        assert title_case("webAPP") == "WebAPP"

    def test_dotted_instance_type(self):
        assert title_case("t3.micro") == "T3.Micro"

    def test_empty(self):
        assert title_case("") == ""


class TestExpandValue:
    """Tests for expand_value"""

    def test_lowercase_value(self):
        assert expand_value("running") == ["*running*", "*Running*"]

    def test_mixed_case_value(self):
        assert expand_value("webServer") == ["*webServer*", "*WebServer*", "*webserver*"]

    def test_uppercase_value(self):
        assert expand_value("WEB") == ["*WEB*", "*web*"]

    def test_order_is_as_is_title_lower(self):
        patterns = expand_value("my app")
        assert patterns[0] == "*my app*"
        assert patterns[1] == "*My App*"

    def test_empty_value_matches_everything(self):
        assert expand_value("") == ["**"]


class TestTranslate:
    """Tests for translate"""

    def test_name_filter(self):
        assert translate("name=web") == {"Name": "tag:Name", "Values": ["*web*", "*Web*"]}

    def test_each_key(self):
        assert translate("az=us-east-1a")["Name"] == "availability-zone"
        assert translate("id=i-0abc")["Name"] == "instance-id"
        assert translate("state=stopped")["Name"] == "instance-state-name"
        assert translate("type=t3.micro")["Name"] == "instance-type"

    def test_splits_on_first_equals_only(self):
        result = translate("name=a=b")
        assert result["Name"] == "tag:Name"
        assert result["Values"] == ["*a=b*", "*A=B*"]

    def test_missing_equals(self):
        with pytest.raises(FilterError, match="invalid filter format"):
            translate("web")

    def test_unknown_key(self):
        with pytest.raises(FilterError, match="invalid filter key: 'color'"):
            translate("color=red")

    def test_keys_are_case_sensitive(self):
        with pytest.raises(FilterError, match="invalid filter key: 'Name'"):
            translate("Name=web")

    def test_empty_key(self):
        with pytest.raises(FilterError, match="invalid filter key: ''"):
            translate("=web")

    def test_empty_value(self):
        assert translate("name=") == {"Name": "tag:Name", "Values": ["**"]}


class TestTranslateAll:
    """Tests for translate_all"""

    def test_translates_in_order(self):
        filters = translate_all(["state=running", "type=t3"])
        assert [f["Name"] for f in filters] == ["instance-state-name", "instance-type"]

    def test_empty(self):
        assert translate_all([]) == []

    def test_first_error_wins(self):
        with pytest.raises(FilterError, match="invalid filter format"):
            translate_all(["state=running", "broken", "color=red"])


class TestLoadFiltersFile:
    """Tests for load_filters_file"""

    def _write(self, tmp_path, content, name="filters.json"):
        path = tmp_path / name
        path.write_text(content if isinstance(content, str) else json.dumps(content))
        return path

    def test_loads_and_translates(self, tmp_path):
        path = self._write(tmp_path, [
            {"Name": "state", "Values": ["running"]},
            {"Name": "name", "Values": ["web", "API"]},
        ])

        filters = load_filters_file(path)

        assert filters == [
            {"Name": "instance-state-name", "Values": ["*running*", "*Running*"]},
            {"Name": "tag:Name", "Values": ["*web*", "*Web*", "*API*", "*api*"]},
        ]

    def test_accepts_string_path(self, tmp_path):
        path = self._write(tmp_path, [{"Name": "id", "Values": ["i-1"]}])
        assert load_filters_file(str(path))[0]["Name"] == "instance-id"

    def test_rejects_non_json_extension(self, tmp_path):
        path = self._write(tmp_path, "[]", name="filters.yaml")
        with pytest.raises(FilterError, match="invalid file format"):
            load_filters_file(path)

    def test_missing_file(self, tmp_path):
        with pytest.raises(FilterError, match="cannot read"):
            load_filters_file(tmp_path / "missing.json")

    def test_invalid_json(self, tmp_path):
        path = self._write(tmp_path, "{not json")
        with pytest.raises(FilterError, match="invalid JSON"):
            load_filters_file(path)

    def test_not_a_list(self, tmp_path):
        path = self._write(tmp_path, {"Name": "state", "Values": ["running"]})
        with pytest.raises(FilterError, match="expected a list"):
            load_filters_file(path)

    def test_unknown_key(self, tmp_path):
        path = self._write(tmp_path, [{"Name": "color", "Values": ["red"]}])
        with pytest.raises(FilterError, match="invalid filter key: 'color'"):
            load_filters_file(path)

    def test_missing_name(self, tmp_path):
        path = self._write(tmp_path, [{"Values": ["red"]}])
        with pytest.raises(FilterError, match="needs a 'Name'"):
            load_filters_file(path)

    def test_values_must_be_list(self, tmp_path):
        path = self._write(tmp_path, [{"Name": "state", "Values": "running"}])
        with pytest.raises(FilterError, match="must be a list"):
            load_filters_file(path)

    def test_missing_values(self, tmp_path):
        path = self._write(tmp_path, [{"Name": "state"}])
        with pytest.raises(FilterError, match="no values for 'state'"):
            load_filters_file(path)

    @pytest.mark.parametrize("values", [None, []])
    def test_null_or_empty_values(self, tmp_path, values):
        path = self._write(tmp_path, [{"Name": "type", "Values": values}])
        with pytest.raises(FilterError, match="no values for 'type'"):
            load_filters_file(path)
