"""
Core browsing logic: models, listing results, panel state, navigation
sync, the file list controller and its view model.
"""
