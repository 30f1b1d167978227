# Modelo Produto: representa um item do estoque no sistema
from . import db, STATUS_ATIVO, STATUS_INATIVO


class Produto(db.Model):
    __tablename__ = 'produto'  # Nome da tabela no banco de dados
    id = db.Column(db.Integer, primary_key=True)  # Identificador único do produto
    nome = db.Column(db.String(150), nullable=False)  # Nome do produto
    descricao = db.Column(db.Text, nullable=True)  # Descrição detalhada do produto
    preco_custo = db.Column(db.Float, nullable=False)  # Preço de custo do produto
    preco = db.Column(db.Float, nullable=False)  # Preço de venda do produto
    estoque = db.Column(db.Integer, default=0)  # Quantidade disponível em estoque
    status = db.Column(db.String(20), default=STATUS_ATIVO, nullable=False)

    @property
    def ativo(self):
        return self.status == STATUS_ATIVO

    @property
    def disponivel(self):
        """Produto pode entrar em uma ordem de serviço"""
        return self.ativo and (self.estoque or 0) > 0

    def inativar(self):
        self.status = STATUS_INATIVO

    def __repr__(self):
        return f'<Produto {self.nome}>'  # Representação legível para debug
