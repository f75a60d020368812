"""
Feature modules for Stepline.

- member: member registry
- steps: ledger, aggregation engine and the StepsService facade
- leaderboard: ranking
- commands: chat command parser and dispatcher
- shared: base service, domain exceptions, validators
"""
