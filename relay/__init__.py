"""Pacote do relay Alertmanager -> Discord.

Este pacote contém:
- constants: variáveis de ambiente e paleta de cores
- exceptions: tipos de erro do relay (validação, configuração, transporte)
- models: modelo tipado do payload do Alertmanager
- embeds: modelo das mensagens enviadas ao Discord
- formatters: agrupamento por status e renderização dos embeds
- services: integração com serviços externos (Discord)
- controller: criação do Flask app e endpoints
"""
