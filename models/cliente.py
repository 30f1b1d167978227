# Modelo Cliente: pessoa física ou jurídica atendida pela empresa
from . import db
from .contato import ContatoMixin


class Cliente(ContatoMixin, db.Model):
    __tablename__ = 'cliente'  # Nome da tabela no banco de dados
    ordens = db.relationship('OrdemServico', backref='cliente', lazy=True)  # Ordens de serviço do cliente

    def __repr__(self):
        return f'<Cliente {self.nome} status={self.status}>'
