from gptkit.engines import Engine, EnginesList, engine_path


def test_engine_path():
    assert engine_path("text-davinci-003") == "/engines/text-davinci-003"


def test_empty_engine():
    assert Engine.from_dict({"id": "", "object": "", "owner": "", "ready": False}) == Engine()


def test_engine_from_dict():
    engine = Engine.from_dict(
        {"id": "text-davinci-003", "object": "engine", "owner": "openai", "ready": True}
    )
    assert engine.id == "text-davinci-003"
    assert engine.owner == "openai"
    assert engine.ready is True


def test_empty_engines_list():
    assert EnginesList.from_dict({"data": None}).engines == []


def test_engines_list_from_dict():
    engines = EnginesList.from_dict({"data": [{"id": "a"}, {"id": "b", "ready": True}]})
    assert [e.id for e in engines.engines] == ["a", "b"]
    assert engines.engines[1].ready is True