# src/flatconf/core/__init__.py
"""
Core do flatconf.

Este pacote reúne a implementação canônica do adapter de configuração,
independente de qualquer aplicação consumidora.

O core é projetado para ser:
    - determinístico
    - testável de forma isolada
    - livre de estado global

Componentes principais:
    - config → árvore resolvida, loader, renderização, hashing e adapter plano

Limites explícitos:
    - Não configura handlers de logging
    - Não depende de CLI ou serviços externos
"""
