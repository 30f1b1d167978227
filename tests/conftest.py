import pytest

from app import app as flask_app
from config import TestConfig
from dados_mock import resetar_dados
from models import db


@pytest.fixture
def app():
    flask_app.config.from_object(TestConfig)
    with flask_app.app_context():
        resetar_dados()
    yield flask_app
    with flask_app.app_context():
        db.session.remove()


@pytest.fixture
def client(app):
    return app.test_client()


@pytest.fixture
def client_logado(client):
    resposta = client.post('/login', data={'email': 'user@example.com', 'senha': 'password'})
    assert resposta.status_code == 302
    return client


@pytest.fixture
def consultar(app):
    """Executa uma função dentro de um app_context novo (sessão limpa)"""
    def _consultar(funcao):
        with app.app_context():
            return funcao()
    return _consultar
