"""
blastdoctor services: external tool access, database catalog and the doctor.
"""
