# Modelo Fornecedor: mesmo formato do Cliente
from . import db
from .contato import ContatoMixin


class Fornecedor(ContatoMixin, db.Model):
    __tablename__ = 'fornecedor'

    def __repr__(self):
        return f'<Fornecedor {self.nome} status={self.status}>'
