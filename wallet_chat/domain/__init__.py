"""领域层模型与异常。

包含：
- models: Identity / Credential / QueryResult 等流程数据结构。
- exceptions: 各阶段的业务异常类型定义。
"""
