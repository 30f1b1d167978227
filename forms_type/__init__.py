# Formulários específicos de cada página do painel
from .login_form import LoginForm
from .contato_form import ClienteForm, CadastroClienteForm, FornecedorForm, CadastroFornecedorForm
from .produto_form import ProdutoForm, CadastroProdutoForm
from .servico_form import ServicoForm, CadastroServicoForm
from .ordem_servico_form import OrdemServicoForm, StatusOrdemForm
