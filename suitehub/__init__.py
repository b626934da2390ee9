"""
E23 suite hub: events calendar, RSVPs and admin panel
"""
