# Inicialização do SQLAlchemy e importação dos modelos do sistema
from flask_sqlalchemy import SQLAlchemy

db = SQLAlchemy()  # Instância global do banco de dados (SQLite em memória)

# Status compartilhados pelos cadastros (clientes, produtos, serviços, fornecedores)
STATUS_ATIVO = 'Ativo'
STATUS_INATIVO = 'Inativo'
STATUS_CADASTRO = (STATUS_ATIVO, STATUS_INATIVO)

# Importação dos modelos para registro no SQLAlchemy
from .cliente import Cliente
from .fornecedor import Fornecedor
from .produto import Produto
from .servico import Servico
from .ordem_servico import OrdemServico, ItemOrdemServico
from .usuario import Usuario
