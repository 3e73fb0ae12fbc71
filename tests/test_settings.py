from mongoql.settings import MongoQLSettings


def test_defaults():
    s = MongoQLSettings()
    assert s.log_level == "INFO"
    assert s.json_indent == 2
    assert s.demo_username == "yusef"


def test_env_prefix(monkeypatch):
    monkeypatch.setenv("MONGOQL_JSON_INDENT", "4")
    monkeypatch.setenv("MONGOQL_DEMO_USERNAME", "ada")
    s = MongoQLSettings()
    assert s.json_indent == 4
    assert s.demo_username == "ada"
