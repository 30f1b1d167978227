# Cálculos das ordens de serviço: itens do rascunho e total da ordem
#
# Os itens podem ser objetos ItemOrdemServico (já gravados) ou dicionários do
# rascunho guardado na sessão, no formato:
#   {'tipo': 'produto'|'servico', 'id': int, 'nome': str, 'quantidade': int, 'preco': float}


def _valor(item, campo):
    if isinstance(item, dict):
        return item[campo]
    return getattr(item, campo)


# Função para calcular o subtotal de um item
# Parâmetros:
#   item: item da ordem (dicionário do rascunho ou ItemOrdemServico)
# Retorna: quantidade x preço unitário

def calcular_subtotal_item(item):
    """Calcula o subtotal (quantidade x preço) de um item"""
    return _valor(item, 'quantidade') * _valor(item, 'preco')


# Função para calcular o total de uma ordem de serviço
# Parâmetros:
#   itens: lista de itens da ordem
# Retorna: soma dos subtotais (0.0 para uma ordem sem itens)

def calcular_total_ordem(itens):
    """Calcula o total da ordem somando quantidade x preço de cada item"""
    return float(sum(calcular_subtotal_item(item) for item in itens))


def adicionar_item(itens, tipo, referencia_id, nome, preco):
    """Inclui um produto/serviço no rascunho.

    Se o mesmo (tipo, id) já estiver no rascunho, apenas incrementa a
    quantidade. Retorna uma nova lista; a original não é alterada.
    """
    novos = [dict(item) for item in itens]
    for item in novos:
        if item['tipo'] == tipo and item['id'] == referencia_id:
            item['quantidade'] += 1
            return novos
    novos.append({
        'tipo': tipo,
        'id': referencia_id,
        'nome': nome,
        'quantidade': 1,
        'preco': float(preco),
    })
    return novos


def remover_item(itens, indice):
    """Remove o item na posição `indice` do rascunho.

    Levanta IndexError se a posição não existir.
    """
    if indice < 0 or indice >= len(itens):
        raise IndexError(f'Item {indice} não existe no rascunho')
    return [dict(item) for posicao, item in enumerate(itens) if posicao != indice]
