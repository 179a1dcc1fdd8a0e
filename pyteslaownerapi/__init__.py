"""Library to integrate with the Tesla owner API.

This library provides an asyncio Python interface to the Tesla owner API,
with abilities to list the vehicles of an account, read vehicle status data
and send remote commands to control certain vehicle functions.

NOTE: This work is not officially supported by Tesla and functionality
can stop working at any time without warning.

"""
