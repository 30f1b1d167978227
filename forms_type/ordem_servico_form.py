# Formulários de ordem de serviço (criação e atualização de status)
from flask_wtf import FlaskForm
from wtforms import SelectField, TextAreaField, SubmitField
from wtforms.validators import DataRequired, Optional

from models.ordem_servico import STATUS_ORDEM, STATUS_PENDENTE


class OrdemServicoForm(FlaskForm):
    cliente_id = SelectField('Cliente', coerce=int, validators=[DataRequired(message='Selecione um cliente.')])  # Escolhas definidas na rota
    descricao = TextAreaField('Descrição do Serviço', validators=[Optional()], render_kw={"rows": 3, "placeholder": "Descreva o problema ou serviço a ser realizado..."})
    status = SelectField('Status', choices=[(s, s) for s in STATUS_ORDEM], default=STATUS_PENDENTE)
    # Seletores dos itens; lidos apenas pelas ações de adicionar item
    servico_id = SelectField('Serviço', coerce=int, validate_choice=False, validators=[Optional()])
    produto_id = SelectField('Produto', coerce=int, validate_choice=False, validators=[Optional()])
    submit = SubmitField('Salvar Ordem de Serviço')


class StatusOrdemForm(FlaskForm):
    status = SelectField('Status', choices=[(s, s) for s in STATUS_ORDEM])
    submit = SubmitField('Atualizar')
