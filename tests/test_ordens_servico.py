import pytest

from calculos_ordem import adicionar_item, remover_item, calcular_total_ordem, calcular_subtotal_item
from models import OrdemServico, Produto
from models.ordem_servico import STATUS_PENDENTE, STATUS_EM_ANDAMENTO, STATUS_CANCELADA


def test_total_e_soma_de_quantidade_vezes_preco():
    itens = []
    itens = adicionar_item(itens, 'servico', 1, 'Consultoria de Marketing Digital', 1500.00)
    itens = adicionar_item(itens, 'produto', 2, 'Mouse Sem Fio', 150.00)
    itens = adicionar_item(itens, 'produto', 2, 'Mouse Sem Fio', 150.00)

    assert len(itens) == 2
    assert itens[1]['quantidade'] == 2
    assert calcular_subtotal_item(itens[1]) == 300.00
    assert calcular_total_ordem(itens) == pytest.approx(1800.00)


def test_mesmo_id_com_tipos_diferentes_gera_itens_distintos():
    itens = adicionar_item([], 'produto', 1, 'Notebook Pro', 7500.00)
    itens = adicionar_item(itens, 'servico', 1, 'Consultoria de Marketing Digital', 1500.00)
    assert [item['tipo'] for item in itens] == ['produto', 'servico']
    assert calcular_total_ordem(itens) == pytest.approx(9000.00)


def test_remover_item_recalcula_total():
    itens = adicionar_item([], 'servico', 2, 'Desenvolvimento de Website', 3500.00)
    itens = adicionar_item(itens, 'produto', 1, 'Notebook Pro', 7500.00)

    restantes = remover_item(itens, 0)

    assert [item['nome'] for item in restantes] == ['Notebook Pro']
    assert calcular_total_ordem(restantes) == pytest.approx(7500.00)
    # A lista original não é alterada
    assert len(itens) == 2


def test_remover_item_inexistente():
    with pytest.raises(IndexError):
        remover_item([], 0)


def test_ordem_sem_itens_tem_total_zero():
    assert calcular_total_ordem([]) == 0.0


def test_ordens_mock_tem_total_derivado_dos_itens(consultar):
    ordens = consultar(lambda: [(o.total, calcular_total_ordem(o.itens)) for o in OrdemServico.query.all()])
    assert ordens
    for total, calculado in ordens:
        assert total == pytest.approx(calculado)


def test_fluxo_de_nova_ordem(client_logado, consultar):
    url = '/dashboard/ordens-servico/nova'
    assert client_logado.get(url).status_code == 200
    formulario = {'cliente_id': '1', 'descricao': 'Instalação de rede', 'status': STATUS_PENDENTE,
                  'servico_id': '1', 'produto_id': '2'}

    client_logado.post(url, data=dict(formulario, acao='adicionar_servico'))
    client_logado.post(url, data=dict(formulario, acao='adicionar_produto'))
    resposta = client_logado.post(url, data=dict(formulario, acao='adicionar_produto'))
    assert 'R$ 1.800,00' in resposta.get_data(as_text=True)

    # Remove o serviço (primeira linha); o total passa a ser só dos produtos
    resposta = client_logado.post(url, data=dict(formulario, acao='remover_0'))
    assert 'R$ 300,00' in resposta.get_data(as_text=True)

    antes = consultar(lambda: OrdemServico.query.count())
    resposta = client_logado.post(url, data=dict(formulario, acao='salvar'))
    assert resposta.status_code == 302
    assert consultar(lambda: OrdemServico.query.count()) == antes + 1

    ordem = consultar(lambda: OrdemServico.query.order_by(OrdemServico.id.desc()).first())
    assert ordem.cliente_nome == 'Liam Johnson'
    assert ordem.total == pytest.approx(300.00)
    itens = consultar(lambda: [(i.nome, i.quantidade, i.preco) for i in OrdemServico.query.get(ordem.id).itens])
    assert itens == [('Mouse Sem Fio', 2, 150.00)]


def test_nova_ordem_exige_cliente(client_logado, consultar):
    url = '/dashboard/ordens-servico/nova'
    client_logado.get(url)
    antes = consultar(lambda: OrdemServico.query.count())
    resposta = client_logado.post(url, data={'cliente_id': '0', 'status': STATUS_PENDENTE, 'acao': 'salvar'})
    assert resposta.status_code == 200
    assert 'Selecione um cliente.' in resposta.get_data(as_text=True)
    assert consultar(lambda: OrdemServico.query.count()) == antes


def test_produto_sem_estoque_nao_entra_na_ordem(client_logado):
    url = '/dashboard/ordens-servico/nova'
    client_logado.get(url)
    # Teclado Mecânico (id 3) está sem estoque
    resposta = client_logado.post(url, data={'cliente_id': '1', 'produto_id': '3', 'acao': 'adicionar_produto'})
    texto = resposta.get_data(as_text=True)
    assert 'Selecione um produto disponível em estoque.' in texto
    assert 'Nenhum item adicionado.' in texto


def test_remover_indice_invalido_mantem_rascunho(client_logado):
    url = '/dashboard/ordens-servico/nova'
    client_logado.get(url)
    client_logado.post(url, data={'cliente_id': '1', 'servico_id': '2', 'acao': 'adicionar_servico'})
    resposta = client_logado.post(url, data={'cliente_id': '1', 'acao': 'remover_7'})
    texto = resposta.get_data(as_text=True)
    assert 'Item não encontrado na ordem de serviço.' in texto
    assert 'R$ 3.500,00' in texto


def test_atualizar_status_da_ordem(client_logado, consultar):
    # O.S. 3 está pendente
    resposta = client_logado.post('/dashboard/ordens-servico/3/status', data={'status': STATUS_EM_ANDAMENTO})
    assert resposta.status_code == 302
    assert consultar(lambda: OrdemServico.query.get(3).status) == STATUS_EM_ANDAMENTO


def test_ordem_finalizada_nao_muda_de_status(client_logado, consultar):
    # O.S. 1 já foi concluída
    client_logado.post('/dashboard/ordens-servico/1/status', data={'status': STATUS_CANCELADA})
    assert consultar(lambda: OrdemServico.query.get(1).status) != STATUS_CANCELADA


def test_listagem_filtra_por_status(client_logado):
    texto = client_logado.get('/dashboard/ordens-servico?status=pendentes').get_data(as_text=True)
    assert 'Noah Williams' in texto
    assert 'Olivia Smith' not in texto


def test_dashboard_lista_ordens_do_mesmo_dia_da_mais_recente(client_logado, consultar):
    url = '/dashboard/ordens-servico/nova'
    for descricao in ('Primeira do dia', 'Segunda do dia'):
        client_logado.get(url)
        client_logado.post(url, data={'cliente_id': '1', 'descricao': descricao,
                                      'status': STATUS_PENDENTE, 'acao': 'salvar'})
    primeira, segunda = consultar(lambda: [o.id for o in OrdemServico.query.order_by(OrdemServico.id.asc())][-2:])

    texto = client_logado.get('/dashboard').get_data(as_text=True)
    assert texto.index(f'href="/dashboard/ordens-servico/{segunda}"') < texto.index(f'href="/dashboard/ordens-servico/{primeira}"')


def test_produto_disponivel_exige_ativo_e_estoque(consultar):
    assert consultar(lambda: Produto.query.get(1).disponivel)
    # Teclado Mecânico (id 3) está sem estoque
    assert not consultar(lambda: Produto.query.get(3).disponivel)
