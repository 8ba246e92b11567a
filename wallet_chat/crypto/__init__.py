"""钱包密钥相关的纯函数（地址派生、签名、验签）。"""
