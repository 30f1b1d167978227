# Formulário de login de usuário
from flask_wtf import FlaskForm
from wtforms import StringField, PasswordField, BooleanField, SubmitField
from wtforms.validators import DataRequired, Email, Length


class LoginForm(FlaskForm):
    email = StringField('Email', validators=[DataRequired(message='Informe o e-mail.'), Email(message='Por favor, insira um endereço de e-mail válido.')])  # E-mail do usuário
    senha = PasswordField('Senha', validators=[DataRequired(message='Informe a senha.'), Length(min=6, message='A senha deve ter pelo menos 6 caracteres.')])  # Senha do usuário
    lembrar = BooleanField('Lembrar de mim')  # Mantém a sessão após fechar o navegador
    submit = SubmitField('Entrar')  # Botão de login
