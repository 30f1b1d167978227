# Formulários para cadastro e edição de serviços
from flask_wtf import FlaskForm
from wtforms import StringField, DecimalField, SubmitField, TextAreaField, SelectField
from wtforms.validators import InputRequired, Length, NumberRange, Optional

from formatadores import remover_espacos
from models import STATUS_ATIVO, STATUS_CADASTRO


class ServicoForm(FlaskForm):
    nome = StringField('Nome do Serviço', filters=[remover_espacos], validators=[Length(min=3, max=150, message='O nome deve ter pelo menos 3 caracteres.')])
    descricao = TextAreaField('Descrição', validators=[Optional()])
    preco = DecimalField('Preço', places=2, validators=[InputRequired(message='Informe o preço.'), NumberRange(min=0.01, message='O preço deve ser maior que zero.')])
    submit = SubmitField('Salvar Alterações')


class CadastroServicoForm(ServicoForm):
    status = SelectField('Status', choices=[(s, s) for s in STATUS_CADASTRO], default=STATUS_ATIVO)
    submit = SubmitField('Salvar Serviço')
