# Modelo Usuario: usuário de demonstração usado pelo Flask-Login
from flask_login import UserMixin


class Usuario(UserMixin):
    """Usuário em memória (não há tabela de usuários nem cadastro).

    O login aceita apenas o par de credenciais configurado em
    `Config.USUARIO_DEMO_EMAIL` / `Config.USUARIO_DEMO_SENHA`.
    """

    def __init__(self, email, nome):
        self.id = email  # O e-mail identifica o usuário na sessão
        self.email = email
        self.nome = nome

    def __repr__(self):
        return f'<Usuario {self.email}>'
