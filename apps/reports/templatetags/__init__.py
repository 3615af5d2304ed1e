"""
Template tags package for reports app.

Provides custom template tags and filters for the overdue report:
- urgency_band: Classify days overdue (low/medium/high/critical)
- urgency_class: Return CSS class for an urgency band
- format_due_date: Format a due date for the report table
- urgency_badge, priority_badge, kind_badge: HTML badges
"""
