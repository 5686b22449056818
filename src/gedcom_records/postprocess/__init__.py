"""
Post-materialization passes over a RecordGraph.
"""
