"""
Exchange Connectors Package

Each exchange has its own subfolder with:
- api_client.py: HttpClient transport for the exchange's REST API
- requests.py: BaseRequest subclasses per endpoint
- __init__.py: Facade composing requests, transport and post-processors
"""
