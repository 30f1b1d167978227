"""Formatação de valores exibidos nas páginas (padrão brasileiro).

Inclui as máscaras de CPF/CNPJ e telefone aplicadas aos cadastros de
clientes e fornecedores antes de gravar.
"""
import re
from datetime import date, datetime


def somente_digitos(valor):
    return re.sub(r'\D', '', valor or '')


def remover_espacos(valor):
    """Filtro de campo: remove espaços das pontas antes da validação"""
    return valor.strip() if valor else valor


def formatar_preco(valor):
    """Formata um número como moeda BRL: 1500.5 -> 'R$ 1.500,50'"""
    texto = f'{float(valor or 0):,.2f}'
    # Troca separadores do formato en-US para pt-BR
    texto = texto.replace(',', '_').replace('.', ',').replace('_', '.')
    return f'R$ {texto}'


def formatar_data(valor):
    """Formata data no padrão dd/mm/aaaa (aceita date, datetime ou 'aaaa-mm-dd')"""
    if not valor:
        return ''
    if isinstance(valor, str):
        valor = datetime.strptime(valor, '%Y-%m-%d').date()
    if isinstance(valor, datetime):
        valor = valor.date()
    if isinstance(valor, date):
        return valor.strftime('%d/%m/%Y')
    return str(valor)


def formatar_cnpj_cpf(valor):
    """Aplica a máscara de CPF (até 11 dígitos) ou CNPJ (até 14 dígitos).

    Entradas parciais recebem a máscara parcial correspondente.
    """
    digitos = somente_digitos(valor)
    if len(digitos) <= 11:
        # CPF: 000.000.000-00
        texto = re.sub(r'(\d{3})(\d)', r'\1.\2', digitos, count=1)
        texto = re.sub(r'(\d{3})(\d)', r'\1.\2', texto, count=1)
        return re.sub(r'(\d{3})(\d{1,2})$', r'\1-\2', texto, count=1)
    # CNPJ: 00.000.000/0000-00
    texto = digitos[:14]
    texto = re.sub(r'(\d{2})(\d)', r'\1.\2', texto, count=1)
    texto = re.sub(r'(\d{3})(\d)', r'\1.\2', texto, count=1)
    texto = re.sub(r'(\d{3})(\d)', r'\1/\2', texto, count=1)
    return re.sub(r'(\d{4})(\d{1,2})$', r'\1-\2', texto, count=1)


def formatar_telefone(valor):
    """Aplica a máscara de telefone fixo (10 dígitos) ou celular (11 dígitos)"""
    digitos = somente_digitos(valor)
    if len(digitos) <= 10:
        texto = re.sub(r'(\d{2})(\d)', r'(\1) \2', digitos, count=1)
        return re.sub(r'(\d{4})(\d)', r'\1-\2', texto, count=1)
    texto = re.sub(r'(\d{2})(\d)', r'(\1) \2', digitos[:11], count=1)
    return re.sub(r'(\d{5})(\d)', r'\1-\2', texto, count=1)
