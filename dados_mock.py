"""Dados mock carregados no banco em memória.

Os registros são recriados sempre que a aplicação inicia (ou quando
`resetar_dados()` é chamado); nada é persistido entre execuções.
"""
from datetime import date

from models import (
    db, Cliente, Fornecedor, Produto, Servico, OrdemServico, ItemOrdemServico,
    STATUS_ATIVO, STATUS_INATIVO,
)
from models.ordem_servico import (
    STATUS_PENDENTE, STATUS_EM_ANDAMENTO, STATUS_CONCLUIDA, TIPO_PRODUTO, TIPO_SERVICO,
)

CLIENTES_MOCK = [
    {'id': 1, 'nome': 'Liam Johnson', 'email': 'liam@example.com', 'telefone': '(11) 98765-4321',
     'telefone_whatsapp': True, 'cnpj_cpf': '123.456.789-09', 'status': STATUS_ATIVO},
    {'id': 2, 'nome': 'Olivia Smith', 'email': 'olivia@example.com', 'telefone': '(21) 91234-5678',
     'telefone_whatsapp': False, 'cnpj_cpf': '11.444.777/0001-61', 'status': STATUS_ATIVO},
    {'id': 3, 'nome': 'Noah Williams', 'email': 'noah@example.com', 'telefone': '(31) 98888-7777',
     'telefone_whatsapp': True, 'cnpj_cpf': '987.654.321-00', 'status': STATUS_INATIVO},
]

FORNECEDORES_MOCK = [
    {'id': 1, 'nome': 'Fornecedor Exemplo 1', 'email': 'contato@fornecedor1.com', 'telefone': '(21) 99999-8888',
     'telefone_whatsapp': True, 'cnpj_cpf': '11.222.333/0001-44', 'status': STATUS_ATIVO},
    {'id': 2, 'nome': 'Fornecedor Exemplo 2', 'email': 'vendas@fornecedor2.com.br', 'telefone': '(31) 97777-6666',
     'telefone_whatsapp': False, 'cnpj_cpf': '123.456.789-10', 'status': STATUS_INATIVO},
]

PRODUTOS_MOCK = [
    {'id': 1, 'nome': 'Notebook Pro', 'descricao': 'Notebook de alta performance para profissionais.',
     'preco_custo': 5000.00, 'preco': 7500.00, 'estoque': 15, 'status': STATUS_ATIVO},
    {'id': 2, 'nome': 'Mouse Sem Fio', 'descricao': 'Mouse ergonômico com conexão bluetooth.',
     'preco_custo': 80.00, 'preco': 150.00, 'estoque': 120, 'status': STATUS_ATIVO},
    {'id': 3, 'nome': 'Teclado Mecânico', 'descricao': 'Teclado com switches blue para gamers e desenvolvedores.',
     'preco_custo': 300.00, 'preco': 450.00, 'estoque': 0, 'status': STATUS_INATIVO},
]

SERVICOS_MOCK = [
    {'id': 1, 'nome': 'Consultoria de Marketing Digital',
     'descricao': 'Análise completa e plano estratégico para redes sociais.', 'preco': 1500.00, 'status': STATUS_ATIVO},
    {'id': 2, 'nome': 'Desenvolvimento de Website',
     'descricao': 'Criação de site institucional responsivo com até 5 páginas.', 'preco': 3500.00, 'status': STATUS_ATIVO},
    {'id': 3, 'nome': 'Manutenção Mensal de Servidor',
     'descricao': 'Monitoramento, backup e atualizações de segurança.', 'preco': 500.00, 'status': STATUS_INATIVO},
]

# Itens: (tipo, id de origem, nome, quantidade, preço unitário cobrado)
ORDENS_MOCK = [
    {'id': 1, 'cliente_id': 1, 'descricao': 'Manutenção de computador e formatação',
     'data_criacao': date(2024, 7, 28), 'status': STATUS_CONCLUIDA,
     'itens': [(TIPO_SERVICO, 3, 'Manutenção Mensal de Servidor', 1, 200.00),
               (TIPO_PRODUTO, 2, 'Mouse Sem Fio', 1, 150.00)]},
    {'id': 2, 'cliente_id': 2, 'descricao': 'Desenvolvimento de novo módulo para o sistema',
     'data_criacao': date(2024, 7, 25), 'status': STATUS_EM_ANDAMENTO,
     'itens': [(TIPO_SERVICO, 2, 'Desenvolvimento de Website', 1, 2500.00)]},
    {'id': 3, 'cliente_id': 3, 'descricao': 'Troca de tela de notebook',
     'data_criacao': date(2024, 7, 29), 'status': STATUS_PENDENTE,
     'itens': [(TIPO_PRODUTO, 3, 'Teclado Mecânico', 1, 450.00),
               (TIPO_SERVICO, 3, 'Manutenção Mensal de Servidor', 2, 200.00)]},
]


def popular_dados_mock():
    """Insere os registros mock no banco (espera tabelas vazias)"""
    for dados in CLIENTES_MOCK:
        db.session.add(Cliente(**dados))
    for dados in FORNECEDORES_MOCK:
        db.session.add(Fornecedor(**dados))
    for dados in PRODUTOS_MOCK:
        db.session.add(Produto(**dados))
    for dados in SERVICOS_MOCK:
        db.session.add(Servico(**dados))
    db.session.flush()

    for dados in ORDENS_MOCK:
        cliente = db.session.get(Cliente, dados['cliente_id'])
        ordem = OrdemServico(
            id=dados['id'],
            cliente_id=cliente.id,
            cliente_nome=cliente.nome,
            descricao=dados['descricao'],
            data_criacao=dados['data_criacao'],
            status=dados['status'],
        )
        for tipo, referencia_id, nome, quantidade, preco in dados['itens']:
            ordem.itens.append(ItemOrdemServico(
                tipo=tipo, referencia_id=referencia_id, nome=nome, quantidade=quantidade, preco=preco,
            ))
        ordem.recalcular_total()
        db.session.add(ordem)
    db.session.commit()


def resetar_dados():
    """Recria as tabelas e recarrega os dados mock (exige app_context)"""
    db.session.remove()
    db.drop_all()
    db.create_all()
    popular_dados_mock()
