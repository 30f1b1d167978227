"""Campos de contato compartilhados por Cliente e Fornecedor.

Os dois cadastros têm o mesmo formato: nome, contato (telefone, indicação de
WhatsApp e e-mail), CNPJ/CPF e status. A inativação é um soft delete via
coluna 'status'; não existe exclusão física.
"""
from . import db, STATUS_ATIVO, STATUS_INATIVO


class ContatoMixin:
    id = db.Column(db.Integer, primary_key=True)  # Identificador único
    nome = db.Column(db.String(150), nullable=False)  # Nome completo / razão social
    email = db.Column(db.String(150), nullable=False)  # E-mail de contato
    telefone = db.Column(db.String(20), nullable=True)  # Telefone formatado
    telefone_whatsapp = db.Column(db.Boolean, default=False, nullable=False)  # Telefone também é WhatsApp
    cnpj_cpf = db.Column(db.String(20), nullable=True)  # Documento formatado
    endereco = db.Column(db.String(255), nullable=True)
    status = db.Column(db.String(20), default=STATUS_ATIVO, nullable=False)  # 'Ativo' ou 'Inativo'

    @property
    def contato(self):
        return {
            'telefone': self.telefone,
            'whatsapp': self.telefone_whatsapp,
            'email': self.email,
        }

    @property
    def ativo(self):
        return self.status == STATUS_ATIVO

    def inativar(self):
        """Marca o registro como inativo (sem caminho de volta para 'Ativo')"""
        self.status = STATUS_INATIVO
