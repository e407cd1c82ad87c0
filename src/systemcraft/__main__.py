"""SystemCraft MCPサーバーのコマンドラインエントリポイント。"""

if __name__ == "__main__":
    import uvicorn

    from systemcraft.config import ServerConfig
    from systemcraft.logging_config import setup_logging
    from systemcraft.server import create_server

    config = ServerConfig()
    setup_logging(config.log_level)
    mcp = create_server(config)
    app = mcp.http_app(transport="streamable-http")
    uvicorn.run(app, host=config.host, port=config.port, log_level=config.log_level.lower())
