"""
canvastasks: upcoming tasks from an iCalendar course feed.

Core entry point: canvastasks.pipeline.load_tasks(text, now).
"""
