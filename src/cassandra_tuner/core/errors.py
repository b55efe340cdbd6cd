# src/cassandra_tuner/core/errors.py
"""
Exceções canônicas do tuner de configuração.

Este módulo define a hierarquia oficial de exceções levantadas durante o
carregamento, a mutação e a persistência do documento de configuração de
um nó (cassandra.yaml) e do arquivo de propriedades de arquivamento.

As exceções aqui definidas representam **falhas fatais do bootstrap**:
nenhuma delas é tratada, reprocessada ou convertida em fallback pelo
tuner. O orquestrador que invoca o tuner decide o que fazer.

Taxonomia:
    - DocumentParseError     → documento ausente, ilegível ou malformado
    - DocumentStructureError → sub-estrutura esperada ausente ou com shape errado
    - TunerIOError           → falha de escrita em qualquer arquivo alvo
    - InvalidIdentityError   → identidade do nó incompleta

Invariantes:
    - Todas as exceções herdam de `TunerError`
    - A mensagem sempre identifica o caminho (arquivo ou chave) envolvido
    - Falhas de I/O são encadeadas (`raise ... from`) ao `OSError` original

Limites explícitos:
    - Não contém erros da camada de settings (ver `core.settings.errors`)
    - Não realiza retry
"""

from __future__ import annotations

from typing import Optional


class TunerError(Exception):
    """
    Exceção base para todas as falhas do tuner de configuração.

    Permite ao orquestrador capturar de forma genérica qualquer falha
    do ciclo load → tune → write sem depender de exceções da stdlib.
    """


class DocumentParseError(TunerError):
    """
    Documento de configuração ausente, ilegível ou malformado.

    Levantada quando:
        - o arquivo não existe ou não pode ser lido
        - o conteúdo não é YAML bem formado
        - o nó raiz não é um mapeamento

    Decisões arquiteturais:
        - Um documento vazio é tratado como malformado: o tuner nunca
          cria um cassandra.yaml do zero
    """

    def __init__(self, message: str, *, path: Optional[str] = None):
        super().__init__(message)
        self.path = path


class DocumentStructureError(TunerError):
    """
    Sub-estrutura obrigatória ausente ou com shape incompatível.

    Exemplos:
        - `seed_provider` vazio ou cuja primeira entrada não é mapeamento
        - `client_encryption_options` / `server_encryption_options` ausentes
        - acesso tipado que encontrou lista onde esperava mapeamento

    Invariantes:
        - `key_path` identifica a chave no formato `a.b[0].c`
        - Nenhuma sub-estrutura é criada implicitamente para evitar o erro
    """

    def __init__(
        self,
        message: str,
        *,
        key_path: str,
        expected: Optional[str] = None,
        actual: Optional[str] = None,
    ):
        super().__init__(message)
        self.key_path = key_path
        self.expected = expected
        self.actual = actual


class TunerIOError(TunerError):
    """
    Falha ao escrever o documento ou o arquivo de propriedades.

    Sempre encadeada ao `OSError` de origem. O arquivo alvo permanece
    intacto, pois a escrita é feita via arquivo temporário + rename.
    """

    def __init__(self, message: str, *, path: str):
        super().__init__(message)
        self.path = path


class InvalidIdentityError(TunerError, ValueError):
    """
    Identidade de runtime do nó incompleta (host ou seed provider vazio).

    Herda também de `ValueError`: é um argumento inválido do chamador,
    detectado antes de qualquer leitura do documento.
    """
