# Configurações da aplicação (carregadas via app.config.from_object)
import os


class Config:
    """Configuração padrão do AssistManager"""
    SECRET_KEY = os.environ.get('SECRET_KEY', 'assistmanager-dev-secret-change-me')

    # Banco em memória: os dados mock são recriados a cada inicialização
    SQLALCHEMY_DATABASE_URI = 'sqlite://'
    SQLALCHEMY_TRACK_MODIFICATIONS = False

    LOG_LEVEL = os.environ.get('LOG_LEVEL', 'INFO')

    # Atraso (segundos) usado para simular o salvamento dos formulários
    ATRASO_SALVAMENTO = float(os.environ.get('ATRASO_SALVAMENTO', '1.0'))

    # Único par de credenciais aceito pelo login de demonstração
    USUARIO_DEMO_EMAIL = 'user@example.com'
    USUARIO_DEMO_SENHA = 'password'
    USUARIO_DEMO_NOME = 'Usuário Demo'


class TestConfig(Config):
    """Configuração usada pela suíte de testes"""
    TESTING = True
    WTF_CSRF_ENABLED = False
    ATRASO_SALVAMENTO = 0
