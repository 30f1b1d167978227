"""Modelos de Ordem de Serviço e seus itens.

Uma ordem agrega itens de produto e de serviço para um cliente. O total da
ordem é sempre derivado dos itens (soma de quantidade x preço) e recalculado
por `recalcular_total()`.
"""
from datetime import date

from . import db
from calculos_ordem import calcular_total_ordem

STATUS_PENDENTE = 'Pendente'
STATUS_EM_ANDAMENTO = 'Em Andamento'
STATUS_CONCLUIDA = 'Concluída'
STATUS_CANCELADA = 'Cancelada'
STATUS_ORDEM = (STATUS_PENDENTE, STATUS_EM_ANDAMENTO, STATUS_CONCLUIDA, STATUS_CANCELADA)
STATUS_FINAIS = (STATUS_CONCLUIDA, STATUS_CANCELADA)  # Não admitem nova alteração

TIPO_PRODUTO = 'produto'
TIPO_SERVICO = 'servico'


class OrdemServico(db.Model):
    __tablename__ = 'ordem_servico'
    id = db.Column(db.Integer, primary_key=True)
    cliente_id = db.Column(db.Integer, db.ForeignKey('cliente.id'), nullable=True)  # Cliente atendido
    cliente_nome = db.Column(db.String(150), nullable=False)  # Nome exibido na listagem
    descricao = db.Column(db.Text, nullable=True)
    total = db.Column(db.Float, default=0.0, nullable=False)  # Soma dos itens
    data_criacao = db.Column(db.Date, default=date.today, nullable=False)
    status = db.Column(db.String(20), default=STATUS_PENDENTE, nullable=False)
    itens = db.relationship('ItemOrdemServico', backref='ordem', lazy=True,
                            cascade='all, delete-orphan', order_by='ItemOrdemServico.id')

    @property
    def finalizada(self):
        return self.status in STATUS_FINAIS

    def recalcular_total(self):
        self.total = calcular_total_ordem(self.itens)
        return self.total

    def __repr__(self):
        return f'<OrdemServico {self.id} {self.cliente_nome} {self.status}>'


class ItemOrdemServico(db.Model):
    __tablename__ = 'item_ordem_servico'
    id = db.Column(db.Integer, primary_key=True)
    ordem_id = db.Column(db.Integer, db.ForeignKey('ordem_servico.id'), nullable=False)
    tipo = db.Column(db.String(10), nullable=False)  # 'produto' ou 'servico'
    referencia_id = db.Column(db.Integer, nullable=False)  # Id do produto/serviço de origem
    nome = db.Column(db.String(150), nullable=False)
    quantidade = db.Column(db.Integer, default=1, nullable=False)
    preco = db.Column(db.Float, nullable=False)  # Preço unitário no momento da inclusão

    @property
    def subtotal(self):
        return self.quantidade * self.preco
