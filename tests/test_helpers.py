import helpers


def test_idle_clients_are_forgotten(app, monkeypatch):
    clock = [1000.0]
    monkeypatch.setattr(helpers.time, "time", lambda: clock[0])

    with app.test_request_context("/", environ_base={"REMOTE_ADDR": "10.0.0.1"}):
        assert helpers.rate_limit("api_cipher", limit=5, window_s=60) == (True, "10.0.0.1")
    assert "10.0.0.1" in helpers._RATE

    clock[0] += 61
    with app.test_request_context("/", environ_base={"REMOTE_ADDR": "10.0.0.2"}):
        helpers.rate_limit("api_cipher", limit=5, window_s=60)

    assert "10.0.0.1" not in helpers._RATE
    assert list(helpers._RATE) == ["10.0.0.2"]


def test_active_clients_keep_their_history(app, monkeypatch):
    clock = [1000.0]
    monkeypatch.setattr(helpers.time, "time", lambda: clock[0])

    with app.test_request_context("/", environ_base={"REMOTE_ADDR": "10.0.0.1"}):
        helpers.rate_limit("api_cipher", limit=2, window_s=60)
        clock[0] += 30
        helpers.rate_limit("api_cipher", limit=2, window_s=60)
        clock[0] += 31
        # first hit has aged out, second is still inside the window
        assert helpers.rate_limit("api_cipher", limit=2, window_s=60)[0] is True
        assert helpers.rate_limit("api_cipher", limit=2, window_s=60)[0] is False


def test_payload_null_fields(app):
    with app.test_request_context("/", method="POST", json={"text": None, "key": None, "options": None}):
        assert helpers.get_payload() == ("", "", "", {})
