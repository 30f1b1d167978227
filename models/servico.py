# Modelo Servico: serviço prestado e cobrado nas ordens de serviço
from . import db, STATUS_ATIVO, STATUS_INATIVO


class Servico(db.Model):
    __tablename__ = 'servico'
    id = db.Column(db.Integer, primary_key=True)
    nome = db.Column(db.String(150), nullable=False)
    descricao = db.Column(db.Text, nullable=True)
    preco = db.Column(db.Float, nullable=False)  # Preço cobrado por unidade
    status = db.Column(db.String(20), default=STATUS_ATIVO, nullable=False)

    @property
    def ativo(self):
        return self.status == STATUS_ATIVO

    def inativar(self):
        self.status = STATUS_INATIVO

    def __repr__(self):
        return f'<Servico {self.nome}>'
