from backend.settings import (
    DEFAULT_SETTINGS,
    SETTINGS_KEY,
    get_value,
    load_settings,
    set_value,
)


def test_defaults_are_created_on_first_load(store):
    assert load_settings(store) == DEFAULT_SETTINGS
    assert store.load(SETTINGS_KEY) == DEFAULT_SETTINGS


def test_set_value_persists(store):
    set_value(store, "rest_duration", 90)
    assert get_value(store, "rest_duration") == 90
    assert get_value(store, "chart_days") == 7


def test_unknown_key_is_appended(store):
    set_value(store, "units", "kg")
    assert {"key": "units", "value": "kg", "type": "str"} in load_settings(store)


def test_missing_entry_falls_back_to_default(store):
    store.save(SETTINGS_KEY, [{"key": "chart_days", "value": 14, "type": "int"}])
    assert get_value(store, "rest_duration") == 60
    assert get_value(store, "chart_days") == 14
    assert get_value(store, "nothing") is None


def test_malformed_settings_are_replaced(store, caplog):
    store.save(SETTINGS_KEY, {"rest_duration": 30})
    assert load_settings(store) == DEFAULT_SETTINGS
    assert "malformed" in caplog.text


def test_defaults_are_not_shared(store):
    settings = load_settings(store)
    settings[0]["value"] = 5
    assert DEFAULT_SETTINGS[0]["value"] == 60
