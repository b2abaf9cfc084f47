'''
Resolution engine

match:    ordered first-match-wins rule tables
features: implication-graph closure over enable/disable overrides
merge:    layered extended property maps
assemble: triple -> Target
'''
