# Formulários para cadastro e edição de produtos
from flask_wtf import FlaskForm
from wtforms import StringField, DecimalField, IntegerField, SubmitField, TextAreaField, SelectField
from wtforms.validators import InputRequired, Length, NumberRange, Optional

from formatadores import remover_espacos
from models import STATUS_ATIVO, STATUS_CADASTRO


class ProdutoForm(FlaskForm):
    """Campos comuns ao cadastro e à edição de produto"""
    nome = StringField('Nome do Produto', filters=[remover_espacos], validators=[Length(min=3, max=150, message='O nome deve ter pelo menos 3 caracteres.')])  # Nome do produto
    descricao = TextAreaField('Descrição', validators=[Optional()])  # Descrição detalhada
    preco_custo = DecimalField('Preço de Custo', places=2, validators=[InputRequired(message='Informe o preço de custo.'), NumberRange(min=0, message='O preço de custo não pode ser negativo.')])
    preco = DecimalField('Preço de Venda', places=2, validators=[InputRequired(message='Informe o preço de venda.'), NumberRange(min=0.01, message='O preço de venda deve ser maior que zero.')])
    estoque = IntegerField('Quantidade em Estoque', validators=[InputRequired(message='Informe o estoque.'), NumberRange(min=0, message='O estoque não pode ser negativo.')])
    submit = SubmitField('Salvar Alterações')


class CadastroProdutoForm(ProdutoForm):
    status = SelectField('Status', choices=[(s, s) for s in STATUS_CADASTRO], default=STATUS_ATIVO)
    submit = SubmitField('Salvar Produto')  # Botão de cadastro
