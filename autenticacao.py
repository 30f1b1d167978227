"""Verificação de credenciais do login de demonstração.

Não existe cadastro de usuários: o login aceita apenas o par configurado em
`USUARIO_DEMO_EMAIL` / `USUARIO_DEMO_SENHA`.
"""
from email_validator import validate_email, EmailNotValidError
from flask import current_app

from models import Usuario

MENSAGEM_ENTRADA_INVALIDA = 'Entrada inválida.'
MENSAGEM_CREDENCIAIS_INVALIDAS = 'Email ou senha inválidos.'


def autenticar(email, senha):
    """Confere o par e-mail/senha.

    Retorna None quando as credenciais conferem e uma mensagem de erro caso
    contrário. O redirecionamento fica a cargo da rota de login.
    """
    if not email or not senha:
        return MENSAGEM_ENTRADA_INVALIDA
    try:
        validate_email(email, check_deliverability=False)
    except EmailNotValidError:
        return MENSAGEM_ENTRADA_INVALIDA

    config = current_app.config
    if email == config['USUARIO_DEMO_EMAIL'] and senha == config['USUARIO_DEMO_SENHA']:
        current_app.logger.info('Login bem-sucedido para: %s', email)
        return None
    current_app.logger.warning('Falha no login para: %s', email)
    return MENSAGEM_CREDENCIAIS_INVALIDAS


def usuario_demo():
    config = current_app.config
    return Usuario(config['USUARIO_DEMO_EMAIL'], config['USUARIO_DEMO_NOME'])


def carregar_usuario(usuario_id):
    """Callback do Flask-Login: só o usuário de demonstração existe"""
    if usuario_id == current_app.config['USUARIO_DEMO_EMAIL']:
        return usuario_demo()
    return None
