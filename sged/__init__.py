"""sged — ferramenta de linha de comando do motor de formulários de documentos."""

__version__ = "0.1.0"
