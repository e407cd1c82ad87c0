"""システム設計面接の採点エンジンとMCPサーバー。"""
