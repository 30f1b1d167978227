"""Formulários de cadastro com dados de contato (clientes e fornecedores).

Clientes e fornecedores compartilham os mesmos campos; apenas os rótulos e o
texto do botão mudam. As versões de edição não trazem o campo de status:
a única mudança de status possível é a inativação com confirmação.
"""
from flask_wtf import FlaskForm
from wtforms import StringField, BooleanField, SubmitField, SelectField
from wtforms.validators import Email, Length, Optional

from formatadores import remover_espacos
from models import STATUS_ATIVO, STATUS_CADASTRO


class ContatoForm(FlaskForm):
    nome = StringField('Nome Completo / Razão Social', filters=[remover_espacos], validators=[Length(min=3, max=150, message='O nome deve ter pelo menos 3 caracteres.')])
    email = StringField('Email', validators=[Email(message='Por favor, insira um endereço de e-mail válido.')])
    cnpj_cpf = StringField('CNPJ / CPF', validators=[Optional(), Length(max=20)])
    telefone = StringField('Telefone', validators=[Optional(), Length(max=20)])
    telefone_whatsapp = BooleanField('Este telefone é WhatsApp')
    endereco = StringField('Endereço', validators=[Optional(), Length(max=255)])


class ClienteForm(ContatoForm):
    submit = SubmitField('Salvar Alterações')


class CadastroClienteForm(ContatoForm):
    status = SelectField('Status', choices=[(s, s) for s in STATUS_CADASTRO], default=STATUS_ATIVO)
    submit = SubmitField('Salvar Cliente')


class FornecedorForm(ContatoForm):
    submit = SubmitField('Salvar Alterações')


class CadastroFornecedorForm(ContatoForm):
    status = SelectField('Status', choices=[(s, s) for s in STATUS_CADASTRO], default=STATUS_ATIVO)
    submit = SubmitField('Salvar Fornecedor')
