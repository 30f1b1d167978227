from datetime import date

from formatadores import formatar_preco, formatar_data, formatar_cnpj_cpf, formatar_telefone


def test_formatar_preco_em_reais():
    assert formatar_preco(1500) == 'R$ 1.500,00'
    assert formatar_preco(7500.5) == 'R$ 7.500,50'
    assert formatar_preco(0) == 'R$ 0,00'
    assert formatar_preco(1234567.891) == 'R$ 1.234.567,89'


def test_formatar_data():
    assert formatar_data(date(2024, 7, 28)) == '28/07/2024'
    assert formatar_data('2024-07-05') == '05/07/2024'
    assert formatar_data(None) == ''


def test_mascara_cpf():
    assert formatar_cnpj_cpf('12345678910') == '123.456.789-10'
    assert formatar_cnpj_cpf('123.456.789-10') == '123.456.789-10'
    assert formatar_cnpj_cpf('1234') == '123.4'


def test_mascara_cnpj():
    assert formatar_cnpj_cpf('11222333000144') == '11.222.333/0001-44'
    # Dígitos excedentes são descartados
    assert formatar_cnpj_cpf('1122233300014499') == '11.222.333/0001-44'


def test_mascara_telefone():
    assert formatar_telefone('11987654321') == '(11) 98765-4321'
    assert formatar_telefone('1133334444') == '(11) 3333-4444'
    assert formatar_telefone('') == ''
