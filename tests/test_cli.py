import io

from cantina.cli import main, run


def session(text):
    out = io.StringIO()
    run(io.StringIO(text), out)
    return out.getvalue()


def test_exit_immediately():
    output = session("0\n")
    assert output.count("===== MENU PRINCIPAL =====") == 1
    assert output.endswith("opcao invalida!\nPrograma encerrado.\n")


def test_end_of_input_stops():
    output = session("")
    assert output.endswith("Programa encerrado.\n")


def test_invalid_option():
    output = session("9\n0\n")
    assert output.count("opcao invalida!") == 2
    assert output.count("===== MENU PRINCIPAL =====") == 2


def test_register_and_list_product():
    output = session("1\nBanana Prata\n0\n1\n20\n2\n0\n")
    assert "Produto cadastrado com sucesso." in output
    assert "[1] Banana Prata | Fruta | 20 EM ESTOQUE" in output


def test_register_low_stock_product_goes_to_restock():
    output = session("1\nBis\n3\n2\n5\n7\n0\n")
    assert "Aviso: Produto com estoque baixo" in output
    assert "Código: 2 | Nome: Bis" in output


def test_invalid_category():
    output = session("1\nX\n9\n2\n0\n")
    assert "categoria invalida" in output
    assert "catalogo invalido ou vazio" in output


def test_duplicate_product():
    output = session("1\nA\n0\n1\n20\n1\nB\n0\n1\n30\n0\n")
    assert "Esse codigo ja foi cadastrado no catalogo!" in output
    assert "Erro ao cadastrar o produto." in output


def test_students_and_sale_report():
    script = (
        "3\nJoao Silva\n123456\n"
        "1\nBala\n1\n7\n40\n"
        "5\n123456\n7\n2\n"
        "6\n123456\n"
        "4\n0\n"
    )
    output = session(script)
    assert "Aluno cadastrado com sucesso." in output
    assert "Venda registrada com sucesso." in output
    assert "Relatorio de vendas do(a) aluno(a) Joao Silva:" in output
    assert "Produto 7 - 2 unidades" in output
    assert "[123456] Joao Silva" in output


def test_duplicate_student():
    output = session("3\nA\n1\n3\nB\n1\n0\n")
    assert output.count("Aluno cadastrado com sucesso.") == 1
    assert "Matricula ja cadastrada." in output


def test_sale_errors():
    script = (
        "5\n1\n1\n1\n"
        "3\nAna\n1\n"
        "1\nBala\n1\n7\n40\n"
        "5\n1\n7\n6\n"
        "0\n"
    )
    output = session(script)
    assert "Erro: Aluno ou produto inexistente." in output
    assert "Aviso: Limite diario de 5 itens excedido!" in output
    assert "Venda registrada com sucesso." not in output


def test_replenish_removes_from_restock():
    script = "1\nBis\n3\n2\n5\n8\n2\n10\n7\n0\n"
    output = session(script)
    assert "Estoque do produto reposto:" in output
    assert "[2] Bis | Chocolate | 15 EM ESTOQUE" in output
    assert "Nenhum produto na lista de reposicao." in output


def test_replenish_unknown_product():
    output = session("8\n5\n3\n0\n")
    assert "Erro: produto nao encontrado ou catalogo invalido" in output


def test_main_runs_on_stdin(monkeypatch, capsys):
    monkeypatch.setattr("sys.stdin", io.StringIO("0\n"))
    assert main([]) == 0
    assert capsys.readouterr().out.endswith("Programa encerrado.\n")