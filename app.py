from flask import Flask, render_template, redirect, url_for, flash, request, Response, session
import csv
import io
import time
from models import db, Cliente, Fornecedor, Produto, Servico, OrdemServico, ItemOrdemServico
from models import STATUS_ATIVO, STATUS_INATIVO
from models.ordem_servico import (
    STATUS_PENDENTE, STATUS_EM_ANDAMENTO, STATUS_CONCLUIDA, STATUS_CANCELADA, STATUS_FINAIS,
    TIPO_PRODUTO, TIPO_SERVICO,
)
from forms import (
    LoginForm, ConfirmacaoForm,
    ClienteForm, CadastroClienteForm,
    FornecedorForm, CadastroFornecedorForm,
    ProdutoForm, CadastroProdutoForm,
    ServicoForm, CadastroServicoForm,
    OrdemServicoForm, StatusOrdemForm,
)
from config import Config
from flask_login import LoginManager, login_user, logout_user, login_required, current_user
from autenticacao import autenticar, usuario_demo, carregar_usuario
from calculos_ordem import adicionar_item, remover_item, calcular_total_ordem
from formatadores import formatar_preco, formatar_data, formatar_cnpj_cpf, formatar_telefone
from dados_mock import popular_dados_mock

app = Flask(__name__)
app.config.from_object(Config)
app.logger.setLevel(app.config['LOG_LEVEL'])

db.init_app(app)

login_manager = LoginManager()
login_manager.init_app(app)
login_manager.login_view = 'login'
login_manager.login_message = 'Faça login para acessar o painel.'
login_manager.login_message_category = 'warning'


@login_manager.user_loader
def load_user(user_id):
    return carregar_usuario(user_id)


app.add_template_filter(formatar_preco, 'preco')
app.add_template_filter(formatar_data, 'data_br')

# Abas de filtro das listagens de cadastro (valor da query string -> status)
FILTROS_STATUS = {
    'todos': None,
    'ativos': STATUS_ATIVO,
    'inativos': STATUS_INATIVO,
}

# Abas de filtro da listagem de ordens de serviço
FILTROS_ORDEM = {
    'todas': None,
    'pendentes': STATUS_PENDENTE,
    'em-andamento': STATUS_EM_ANDAMENTO,
    'concluidas': STATUS_CONCLUIDA,
    'canceladas': STATUS_CANCELADA,
}

RASCUNHO_ORDEM = 'ordem_rascunho'  # Chave da sessão com os itens da nova O.S.


def filtrar_por_status(modelo, filtro, filtros=FILTROS_STATUS):
    """Retorna (filtro aplicado, registros, contagem por aba) para a listagem.

    Filtros desconhecidos caem na aba que lista todos os registros.
    """
    padrao = next(iter(filtros))
    if filtro not in filtros:
        filtro = padrao
    consulta = modelo.query.order_by(modelo.id.asc())
    status = filtros[filtro]
    registros = consulta.filter_by(status=status).all() if status else consulta.all()
    contagens = {}
    for chave, valor in filtros.items():
        contagens[chave] = modelo.query.filter_by(status=valor).count() if valor else modelo.query.count()
    return filtro, registros, contagens


def simular_salvamento():
    """Simula a latência de gravação dos formulários"""
    atraso = app.config.get('ATRASO_SALVAMENTO', 0)
    if atraso and atraso > 0:
        time.sleep(atraso)


def exportar_csv(nome_arquivo, cabecalho, linhas):
    """Gera o download em CSV (separado por ';') da listagem filtrada"""
    saida = io.StringIO()
    escritor = csv.writer(saida, delimiter=';')
    escritor.writerow(cabecalho)
    escritor.writerows(linhas)
    return Response(saida.getvalue(), mimetype='text/csv',
                    headers={"Content-Disposition": f"attachment;filename={nome_arquivo}"})


def confirmar_inativacao(modelo, registro_id, entidade, endpoint_lista):
    """Fluxo de inativação: GET mostra a confirmação, POST aplica o soft delete.

    Apenas o registro indicado é alterado; registros já inativos permanecem
    como estão.
    """
    registro = db.get_or_404(modelo, registro_id)
    form = ConfirmacaoForm()
    if form.validate_on_submit():
        if registro.status == STATUS_INATIVO:
            flash(f'{entidade} "{registro.nome}" já está inativo.', 'warning')
        else:
            registro.inativar()
            db.session.commit()
            app.logger.info('%s %s inativado por %s', entidade, registro.id, current_user.email)
            flash(f'{entidade} "{registro.nome}" foi marcado como inativo.', 'success')
        return redirect(url_for(endpoint_lista))
    return render_template('confirmar_inativacao.html', form=form, registro=registro,
                           entidade=entidade, voltar=url_for(endpoint_lista))


def preencher_contato(registro, form):
    """Copia os campos do formulário de contato aplicando as máscaras"""
    registro.nome = form.nome.data
    registro.email = form.email.data.strip()
    registro.cnpj_cpf = formatar_cnpj_cpf(form.cnpj_cpf.data) or None
    registro.telefone = formatar_telefone(form.telefone.data) or None
    registro.telefone_whatsapp = bool(form.telefone_whatsapp.data)
    registro.endereco = form.endereco.data or None


def preencher_produto(produto, form):
    produto.nome = form.nome.data
    produto.descricao = form.descricao.data or None
    produto.preco_custo = float(form.preco_custo.data)
    produto.preco = float(form.preco.data)
    produto.estoque = form.estoque.data


def preencher_servico(servico, form):
    servico.nome = form.nome.data
    servico.descricao = form.descricao.data or None
    servico.preco = float(form.preco.data)


def gravar_novo(registro, entidade):
    simular_salvamento()
    db.session.add(registro)
    db.session.commit()
    app.logger.info('%s cadastrado: %s (id=%s)', entidade, registro.nome, registro.id)


# ---------------------- Autenticação ----------------------
@app.route('/', methods=['GET', 'POST'])
@app.route('/login', methods=['GET', 'POST'])
def login():
    if current_user.is_authenticated and request.method == 'GET':
        return redirect(url_for('dashboard'))
    form = LoginForm()
    if form.validate_on_submit():
        erro = autenticar(form.email.data, form.senha.data)
        if erro is None:
            login_user(usuario_demo(), remember=form.lembrar.data)
            return redirect(url_for('dashboard'))
        flash(erro, 'danger')
    return render_template('login.html', form=form)


@app.route('/logout', methods=['GET', 'POST'])
@login_required
def logout():
    logout_user()
    flash('Você saiu do sistema.', 'success')
    return redirect(url_for('login'))


@app.route('/dashboard')
@login_required
def dashboard():
    resumo = []
    for titulo, modelo, endpoint in (
        ('Clientes', Cliente, 'listar_clientes'),
        ('Produtos', Produto, 'listar_produtos'),
        ('Serviços', Servico, 'listar_servicos'),
        ('Fornecedores', Fornecedor, 'listar_fornecedores'),
    ):
        resumo.append({
            'titulo': titulo,
            'endpoint': endpoint,
            'ativos': modelo.query.filter_by(status=STATUS_ATIVO).count(),
            'total': modelo.query.count(),
        })
    ordens_abertas = OrdemServico.query.filter(OrdemServico.status.notin_(STATUS_FINAIS)).all()
    return render_template('dashboard.html',
        resumo=resumo,
        ordens_abertas=len(ordens_abertas),
        valor_ordens_abertas=sum(o.total for o in ordens_abertas),
        ultimas_ordens=OrdemServico.query.order_by(OrdemServico.data_criacao.desc(), OrdemServico.id.desc()).limit(5).all()
    )


# ---------------------- Clientes ----------------------
@app.route('/dashboard/clientes')
@login_required
def listar_clientes():
    filtro, clientes, contagens = filtrar_por_status(Cliente, request.args.get('status', 'todos'))
    return render_template('clientes.html', clientes=clientes, filtro=filtro, contagens=contagens)


@app.route('/dashboard/clientes/novo', methods=['GET', 'POST'])
@login_required
def novo_cliente():
    form = CadastroClienteForm()
    if form.validate_on_submit():
        cliente = Cliente(status=form.status.data)
        preencher_contato(cliente, form)
        gravar_novo(cliente, 'Cliente')
        flash(f'Cliente Adicionado! {cliente.nome} foi adicionado com sucesso.', 'success')
        return redirect(url_for('listar_clientes'))
    return render_template('formulario.html', form=form, titulo='Adicionar Novo Cliente',
                           subtitulo='Preencha os detalhes abaixo para adicionar um novo cliente.',
                           voltar=url_for('listar_clientes'))


@app.route('/dashboard/clientes/<int:cliente_id>/editar', methods=['GET', 'POST'])
@login_required
def editar_cliente(cliente_id):
    cliente = db.get_or_404(Cliente, cliente_id)
    form = ClienteForm(obj=cliente)
    if form.validate_on_submit():
        simular_salvamento()
        preencher_contato(cliente, form)
        db.session.commit()
        app.logger.info('Cliente editado: %s (id=%s)', cliente.nome, cliente.id)
        flash(f'Cliente Atualizado! {cliente.nome} foi atualizado com sucesso.', 'success')
        return redirect(url_for('listar_clientes'))
    return render_template('formulario.html', form=form, titulo=f'Editar Cliente: {cliente.nome}',
                           voltar=url_for('listar_clientes'))


@app.route('/dashboard/clientes/<int:cliente_id>/inativar', methods=['GET', 'POST'])
@login_required
def inativar_cliente(cliente_id):
    return confirmar_inativacao(Cliente, cliente_id, 'Cliente', 'listar_clientes')


@app.route('/dashboard/clientes/exportar')
@login_required
def exportar_clientes():
    _, clientes, _ = filtrar_por_status(Cliente, request.args.get('status', 'todos'))
    linhas = [[c.id, c.nome, c.email, c.telefone or '', 'Sim' if c.telefone_whatsapp else 'Não',
               c.cnpj_cpf or '', c.status] for c in clientes]
    return exportar_csv('clientes.csv', ['ID', 'Nome', 'Email', 'Telefone', 'WhatsApp', 'CNPJ/CPF', 'Status'], linhas)


# ---------------------- Fornecedores ----------------------
@app.route('/dashboard/fornecedores')
@login_required
def listar_fornecedores():
    filtro, fornecedores, contagens = filtrar_por_status(Fornecedor, request.args.get('status', 'todos'))
    return render_template('fornecedores.html', fornecedores=fornecedores, filtro=filtro, contagens=contagens)


@app.route('/dashboard/fornecedores/novo', methods=['GET', 'POST'])
@login_required
def novo_fornecedor():
    form = CadastroFornecedorForm()
    if form.validate_on_submit():
        fornecedor = Fornecedor(status=form.status.data)
        preencher_contato(fornecedor, form)
        gravar_novo(fornecedor, 'Fornecedor')
        flash(f'Fornecedor Adicionado! {fornecedor.nome} foi adicionado com sucesso.', 'success')
        return redirect(url_for('listar_fornecedores'))
    return render_template('formulario.html', form=form, titulo='Adicionar Novo Fornecedor',
                           subtitulo='Preencha os detalhes abaixo para adicionar um novo fornecedor.',
                           voltar=url_for('listar_fornecedores'))


@app.route('/dashboard/fornecedores/<int:fornecedor_id>/editar', methods=['GET', 'POST'])
@login_required
def editar_fornecedor(fornecedor_id):
    fornecedor = db.get_or_404(Fornecedor, fornecedor_id)
    form = FornecedorForm(obj=fornecedor)
    if form.validate_on_submit():
        simular_salvamento()
        preencher_contato(fornecedor, form)
        db.session.commit()
        app.logger.info('Fornecedor editado: %s (id=%s)', fornecedor.nome, fornecedor.id)
        flash(f'Fornecedor Atualizado! {fornecedor.nome} foi atualizado com sucesso.', 'success')
        return redirect(url_for('listar_fornecedores'))
    return render_template('formulario.html', form=form, titulo=f'Editar Fornecedor: {fornecedor.nome}',
                           voltar=url_for('listar_fornecedores'))


@app.route('/dashboard/fornecedores/<int:fornecedor_id>/inativar', methods=['GET', 'POST'])
@login_required
def inativar_fornecedor(fornecedor_id):
    return confirmar_inativacao(Fornecedor, fornecedor_id, 'Fornecedor', 'listar_fornecedores')


@app.route('/dashboard/fornecedores/exportar')
@login_required
def exportar_fornecedores():
    _, fornecedores, _ = filtrar_por_status(Fornecedor, request.args.get('status', 'todos'))
    linhas = [[f.id, f.nome, f.email, f.telefone or '', 'Sim' if f.telefone_whatsapp else 'Não',
               f.cnpj_cpf or '', f.status] for f in fornecedores]
    return exportar_csv('fornecedores.csv', ['ID', 'Nome', 'Email', 'Telefone', 'WhatsApp', 'CNPJ/CPF', 'Status'], linhas)


# ---------------------- Produtos ----------------------
@app.route('/dashboard/produtos')
@login_required
def listar_produtos():
    filtro, produtos, contagens = filtrar_por_status(Produto, request.args.get('status', 'todos'))
    return render_template('produtos.html', produtos=produtos, filtro=filtro, contagens=contagens)


@app.route('/dashboard/produtos/novo', methods=['GET', 'POST'])
@login_required
def novo_produto():
    form = CadastroProdutoForm()
    if form.validate_on_submit():
        produto = Produto(status=form.status.data)
        preencher_produto(produto, form)
        gravar_novo(produto, 'Produto')
        flash(f'Produto Adicionado! {produto.nome} foi adicionado com sucesso.', 'success')
        return redirect(url_for('listar_produtos'))
    return render_template('formulario.html', form=form, titulo='Adicionar Novo Produto',
                           subtitulo='Preencha os detalhes abaixo para adicionar um novo produto.',
                           voltar=url_for('listar_produtos'))


@app.route('/dashboard/produtos/<int:produto_id>/editar', methods=['GET', 'POST'])
@login_required
def editar_produto(produto_id):
    produto = db.get_or_404(Produto, produto_id)
    form = ProdutoForm(obj=produto)
    if form.validate_on_submit():
        simular_salvamento()
        preencher_produto(produto, form)
        db.session.commit()
        app.logger.info('Produto editado: %s (id=%s)', produto.nome, produto.id)
        flash(f'Produto Atualizado! {produto.nome} foi atualizado com sucesso.', 'success')
        return redirect(url_for('listar_produtos'))
    return render_template('formulario.html', form=form, titulo=f'Editar Produto: {produto.nome}',
                           voltar=url_for('listar_produtos'))


@app.route('/dashboard/produtos/<int:produto_id>/inativar', methods=['GET', 'POST'])
@login_required
def inativar_produto(produto_id):
    return confirmar_inativacao(Produto, produto_id, 'Produto', 'listar_produtos')


@app.route('/dashboard/produtos/exportar')
@login_required
def exportar_produtos():
    _, produtos, _ = filtrar_por_status(Produto, request.args.get('status', 'todos'))
    linhas = [[p.id, p.nome, p.descricao or '', f'{p.preco_custo:.2f}', f'{p.preco:.2f}', p.estoque, p.status]
              for p in produtos]
    return exportar_csv('produtos.csv', ['ID', 'Nome', 'Descrição', 'Preço de Custo', 'Preço de Venda', 'Estoque', 'Status'], linhas)


# ---------------------- Serviços ----------------------
@app.route('/dashboard/servicos')
@login_required
def listar_servicos():
    filtro, servicos, contagens = filtrar_por_status(Servico, request.args.get('status', 'todos'))
    return render_template('servicos.html', servicos=servicos, filtro=filtro, contagens=contagens)


@app.route('/dashboard/servicos/novo', methods=['GET', 'POST'])
@login_required
def novo_servico():
    form = CadastroServicoForm()
    if form.validate_on_submit():
        servico = Servico(status=form.status.data)
        preencher_servico(servico, form)
        gravar_novo(servico, 'Serviço')
        flash(f'Serviço Adicionado! {servico.nome} foi adicionado com sucesso.', 'success')
        return redirect(url_for('listar_servicos'))
    return render_template('formulario.html', form=form, titulo='Adicionar Novo Serviço',
                           subtitulo='Preencha os detalhes abaixo para adicionar um novo serviço.',
                           voltar=url_for('listar_servicos'))


@app.route('/dashboard/servicos/<int:servico_id>/editar', methods=['GET', 'POST'])
@login_required
def editar_servico(servico_id):
    servico = db.get_or_404(Servico, servico_id)
    form = ServicoForm(obj=servico)
    if form.validate_on_submit():
        simular_salvamento()
        preencher_servico(servico, form)
        db.session.commit()
        app.logger.info('Serviço editado: %s (id=%s)', servico.nome, servico.id)
        flash(f'Serviço Atualizado! {servico.nome} foi atualizado com sucesso.', 'success')
        return redirect(url_for('listar_servicos'))
    return render_template('formulario.html', form=form, titulo=f'Editar Serviço: {servico.nome}',
                           voltar=url_for('listar_servicos'))


@app.route('/dashboard/servicos/<int:servico_id>/inativar', methods=['GET', 'POST'])
@login_required
def inativar_servico(servico_id):
    return confirmar_inativacao(Servico, servico_id, 'Serviço', 'listar_servicos')


@app.route('/dashboard/servicos/exportar')
@login_required
def exportar_servicos():
    _, servicos, _ = filtrar_por_status(Servico, request.args.get('status', 'todos'))
    linhas = [[s.id, s.nome, s.descricao or '', f'{s.preco:.2f}', s.status] for s in servicos]
    return exportar_csv('servicos.csv', ['ID', 'Nome', 'Descrição', 'Preço', 'Status'], linhas)


# ---------------------- Ordens de Serviço ----------------------
@app.route('/dashboard/ordens-servico')
@login_required
def listar_ordens():
    filtro, ordens, contagens = filtrar_por_status(OrdemServico, request.args.get('status', 'todas'), FILTROS_ORDEM)
    return render_template('ordens_servico.html', ordens=ordens, filtro=filtro, contagens=contagens,
                           filtros=FILTROS_ORDEM)


def aplicar_acao_rascunho(acao, itens, form, servicos, produtos):
    """Aplica uma ação de item (adicionar/remover) ao rascunho da O.S."""
    if acao == 'adicionar_servico':
        servico = next((s for s in servicos if s.id == form.servico_id.data), None)
        if servico is None:
            flash('Selecione um serviço disponível.', 'warning')
            return itens
        return adicionar_item(itens, TIPO_SERVICO, servico.id, servico.nome, servico.preco)
    if acao == 'adicionar_produto':
        produto = next((p for p in produtos if p.id == form.produto_id.data), None)
        if produto is None:
            flash('Selecione um produto disponível em estoque.', 'warning')
            return itens
        return adicionar_item(itens, TIPO_PRODUTO, produto.id, produto.nome, produto.preco)
    if acao.startswith('remover_'):
        try:
            return remover_item(itens, int(acao[len('remover_'):]))
        except (ValueError, IndexError):
            flash('Item não encontrado na ordem de serviço.', 'warning')
            return itens
    flash('Ação desconhecida.', 'warning')
    return itens


@app.route('/dashboard/ordens-servico/nova', methods=['GET', 'POST'])
@login_required
def nova_ordem():
    form = OrdemServicoForm()
    clientes = Cliente.query.filter_by(status=STATUS_ATIVO).order_by(Cliente.nome.asc()).all()
    servicos = Servico.query.filter_by(status=STATUS_ATIVO).order_by(Servico.nome.asc()).all()
    produtos = [p for p in Produto.query.order_by(Produto.nome.asc()).all() if p.disponivel]
    form.cliente_id.choices = [(0, 'Selecione um cliente')] + [(c.id, c.nome) for c in clientes]
    form.servico_id.choices = [(0, 'Selecione um serviço')] + [
        (s.id, f'{s.nome} ({formatar_preco(s.preco)})') for s in servicos]
    form.produto_id.choices = [(0, 'Selecione um produto')] + [
        (p.id, f'{p.nome} ({formatar_preco(p.preco)}) - {p.estoque} em estoque') for p in produtos]

    if request.method == 'GET':
        session.pop(RASCUNHO_ORDEM, None)  # Nova O.S. sempre começa sem itens
    itens = session.get(RASCUNHO_ORDEM, [])
    acao = request.form.get('acao', 'salvar')

    if request.method == 'POST' and acao != 'salvar':
        itens = aplicar_acao_rascunho(acao, itens, form, servicos, produtos)
        session[RASCUNHO_ORDEM] = itens
    elif form.validate_on_submit():
        cliente = db.session.get(Cliente, form.cliente_id.data)
        simular_salvamento()
        ordem = OrdemServico(
            cliente_id=cliente.id,
            cliente_nome=cliente.nome,
            descricao=form.descricao.data or None,
            status=form.status.data,
        )
        for item in itens:
            ordem.itens.append(ItemOrdemServico(
                tipo=item['tipo'],
                referencia_id=item['id'],
                nome=item['nome'],
                quantidade=item['quantidade'],
                preco=item['preco'],
            ))
        ordem.recalcular_total()
        db.session.add(ordem)
        db.session.commit()
        session.pop(RASCUNHO_ORDEM, None)
        app.logger.info('O.S. %s criada para %s: %d itens, total %.2f',
                        ordem.id, ordem.cliente_nome, len(ordem.itens), ordem.total)
        flash('Ordem de Serviço Criada! A O.S. para o cliente selecionado foi criada com sucesso.', 'success')
        return redirect(url_for('listar_ordens'))
    return render_template('nova_ordem_servico.html', form=form, itens=itens,
                           total=calcular_total_ordem(itens))


@app.route('/dashboard/ordens-servico/<int:ordem_id>')
@login_required
def detalhe_ordem(ordem_id):
    ordem = db.get_or_404(OrdemServico, ordem_id)
    form = StatusOrdemForm(obj=ordem)
    return render_template('detalhe_ordem_servico.html', ordem=ordem, form=form)


@app.route('/dashboard/ordens-servico/<int:ordem_id>/status', methods=['POST'])
@login_required
def atualizar_status_ordem(ordem_id):
    ordem = db.get_or_404(OrdemServico, ordem_id)
    form = StatusOrdemForm()
    if not form.validate_on_submit():
        flash('Status inválido.', 'danger')
    elif ordem.finalizada:
        flash(f'A O.S. #{ordem.id} está {ordem.status.lower()} e não pode mais ser alterada.', 'warning')
    elif form.status.data == ordem.status:
        flash('Nenhuma alteração de status.', 'info')
    else:
        anterior = ordem.status
        ordem.status = form.status.data
        db.session.commit()
        app.logger.info('O.S. %s: status %s -> %s', ordem.id, anterior, ordem.status)
        flash(f'Status da O.S. #{ordem.id} atualizado para {ordem.status}.', 'success')
    return redirect(url_for('detalhe_ordem', ordem_id=ordem.id))


@app.route('/dashboard/ordens-servico/exportar')
@login_required
def exportar_ordens():
    _, ordens, _ = filtrar_por_status(OrdemServico, request.args.get('status', 'todas'), FILTROS_ORDEM)
    linhas = [[o.id, o.cliente_nome, o.descricao or '', formatar_data(o.data_criacao), f'{o.total:.2f}', o.status]
              for o in ordens]
    return exportar_csv('ordens_servico.csv', ['ID', 'Cliente', 'Descrição', 'Data', 'Total', 'Status'], linhas)


# Banco em memória: tabelas e dados mock são criados ao carregar a aplicação
with app.app_context():
    db.create_all()
    popular_dados_mock()


if __name__ == '__main__':
    app.run(debug=True)
