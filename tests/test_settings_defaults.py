import importlib

import backend.settings


def reload_settings(monkeypatch, **env):
    for name in ('DEBUG', 'SECURE_SSL_REDIRECT', 'LAMMS_API_BASE_URL'):
        monkeypatch.delenv(name, raising=False)
    for name, value in env.items():
        monkeypatch.setenv(name, value)
    return importlib.reload(backend.settings)


def test_default_origin_is_reachable_over_plain_http(monkeypatch):
    module = reload_settings(monkeypatch)

    assert module.DEBUG is False
    assert module.LAMMS_API_BASE_URL == 'http://localhost:8000'
    assert module.SECURE_SSL_REDIRECT is False


def test_ssl_redirect_can_be_enabled(monkeypatch):
    module = reload_settings(monkeypatch, SECURE_SSL_REDIRECT='True')

    assert module.SECURE_SSL_REDIRECT is True
