# Formulários compartilhados do sistema (confirmação de ações, etc)
from flask_wtf import FlaskForm
from wtforms import SubmitField

# Importar formulários específicos de cada página
from forms_type import (
    LoginForm,
    ClienteForm, CadastroClienteForm,
    FornecedorForm, CadastroFornecedorForm,
    ProdutoForm, CadastroProdutoForm,
    ServicoForm, CadastroServicoForm,
    OrdemServicoForm, StatusOrdemForm,
)


class ConfirmacaoForm(FlaskForm):
    """Confirmação de ação irreversível pela interface (ex.: inativar registro).

    Não possui campos além do token CSRF e do botão de envio.
    """
    submit = SubmitField('Confirmar')
