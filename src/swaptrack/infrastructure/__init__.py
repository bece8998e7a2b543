"""Infrastructure layer: persistence and external price feeds"""
