"""Handler Sensu -> Microsoft Teams.

Este pacote contém:
- constants: variáveis de ambiente e mapas de status
- config: configuração imutável do processo
- errors: taxonomia de erros do handler
- events: leitura e validação do evento vindo do stdin
- formatters: montagem do cartão de mensagem do Teams
- services: integração com o webhook do Teams
- controller: pipeline ler -> validar -> formatar -> enviar
- cli: flags de linha de comando e código de saída
"""
