"""
HR Helpdesk Domain

Chatbot sessions and messages employees escalate to an HR officer.
"""
